"""SHA-1 object hashes."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple

from minigit.errors import CommandFormatError, InvalidHash, ParseError
from minigit.object_type import ObjectType

FLAG_T = "-t"
FLAG_W = "-w"


@dataclass(frozen=True)
class GitHash:
    """A 40-character hexadecimal object hash."""

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != 40:
            raise InvalidHash(self.value)

    def __str__(self) -> str:
        return self.value

    def split_at_2(self) -> Tuple[str, str]:
        """Return the directory part and the file part of the object path."""
        return self.value[:2], self.value[2:]

    @classmethod
    def hash_sha1(cls, content: bytes) -> GitHash:
        """Hash raw bytes with SHA-1."""
        return cls(hashlib.sha1(bytes(content)).hexdigest())

    @classmethod
    def hash_object(cls, content: bytes, obj_type: ObjectType) -> GitHash:
        """Hash content as an object of obj_type, header included."""
        return cls.hash_sha1(obj_type.add_header(content))

    @classmethod
    def hash_blob(cls, content: bytes) -> GitHash:
        return cls.hash_object(content, ObjectType.BLOB)

    @classmethod
    def hash_tree(cls, content: bytes) -> GitHash:
        return cls.hash_object(content, ObjectType.TREE)

    @classmethod
    def hash_commit(cls, content: bytes) -> GitHash:
        return cls.hash_object(content, ObjectType.COMMIT)

    def to_bytes(self) -> bytes:
        """Return the 20 raw bytes the hexadecimal string stands for."""
        try:
            return bytes.fromhex(self.value)
        except ValueError as exc:
            raise ParseError(exc) from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> GitHash:
        """Build a hash from its raw bytes."""
        return cls(bytes(data).hex())


def parse_hash_object_args(
    args: Iterable[str],
) -> Tuple[Path, Optional[ObjectType], bool]:
    """Parse hash-object arguments into (path, object type, write flag).

    The path comes before '-t'; every argument after '-t' other than the
    first '-w' names the object type.
    """
    found_t = False
    found_w = False
    path: Optional[Path] = None
    object_type: Optional[ObjectType] = None
    for arg in args:
        if not found_t and arg == FLAG_T:
            found_t = True
        elif not found_w and arg == FLAG_W:
            found_w = True
        elif not found_t:
            path = Path(arg)
        else:
            try:
                object_type = ObjectType(arg)
            except ValueError:
                raise CommandFormatError(
                    f"invalid object type '{arg}' in hash-object command"
                ) from None
    if path is None:
        raise CommandFormatError("path not found for hash-object command")
    return path, object_type, found_w