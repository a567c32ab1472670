"""Reading, writing and deleting objects in the object database."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import BinaryIO, Iterable, Tuple, Union

from minigit.blob import Blob
from minigit.compressor import compress, uncompress
from minigit.errors import (
    FormatError,
    GitIOError,
    InexistentPath,
    InvalidHashArgument,
    ObjectTypeError,
    ParseError,
)
from minigit.hashing import GitHash, parse_hash_object_args
from minigit.object_type import ObjectType

PathArg = Union[str, "os.PathLike[str]"]
HashArg = Union[GitHash, str]

_SIZE = re.compile(r"\+?[0-9]+")


def parse_object_content(content: bytes) -> Tuple[ObjectType, int, bytes]:
    """Split '<type> <size>\\0<content>' into its three parts."""
    data = bytes(content)
    type_part, _, rest = data.partition(b" ")
    obj_type = ObjectType.from_name(type_part.decode("latin-1"))

    size_part, _, body = rest.partition(b"\0")
    size_text = size_part.decode("latin-1")
    if not size_text:
        raise ParseError("cannot parse integer from empty string")
    if not _SIZE.fullmatch(size_text):
        raise ParseError("invalid digit found in string")
    return obj_type, int(size_text), body


def object_path(hash_object: HashArg, path_objects: PathArg) -> Path:
    """Return where the object with the given hash is stored."""
    value = str(hash_object)
    return Path(path_objects) / value[:2] / value[2:]


def open_object(hash_object: HashArg, path_objects: PathArg) -> BinaryIO:
    """Open the stored object for binary reading."""
    path = object_path(hash_object, path_objects)
    if not path.exists():
        raise InvalidHashArgument(f"{hash_object} not in objects")
    try:
        return open(path, "rb")
    except OSError as exc:
        raise GitIOError(exc) from exc


def parse_object(
    hash_object: HashArg, path_objects: PathArg
) -> Tuple[ObjectType, int, bytes]:
    """Read, decompress and split a stored object."""
    with open_object(hash_object, path_objects) as file:
        file_content = uncompress(file)

    if b" " not in file_content or b"\0" not in file_content:
        raise FormatError(
            f"object '{hash_object}' has invalid format "
            "(should be [<type> <size>\0<content>])"
        )
    try:
        return parse_object_content(file_content)
    except ParseError:
        raise FormatError(f"Invalid size in object {hash_object}") from None
    except ObjectTypeError as exc:
        raise FormatError(
            f"invalid object type '{exc.got}' in object {hash_object}"
        ) from None


def save_object(content: bytes, obj_type: ObjectType, path_objects: PathArg) -> GitHash:
    """Store content as an object of obj_type and return its hash."""
    header_content = obj_type.add_header(bytes(content))
    hash_value = GitHash.hash_sha1(header_content)
    path = object_path(hash_value, path_objects)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(compress(header_content))
    except OSError as exc:
        raise GitIOError(exc) from exc
    return hash_value


def save_blob(content: bytes, path_objects: PathArg) -> GitHash:
    return save_object(content, ObjectType.BLOB, path_objects)


def save_tree(content: bytes, path_objects: PathArg) -> GitHash:
    return save_object(content, ObjectType.TREE, path_objects)


def save_commit(content: bytes, path_objects: PathArg) -> GitHash:
    return save_object(content, ObjectType.COMMIT, path_objects)


def delete_object(hash_object: HashArg, path_objects: PathArg) -> None:
    """Remove a stored object; a missing object is left alone."""
    path = object_path(hash_object, path_objects)
    if path.exists():
        try:
            path.unlink()
        except OSError as exc:
            raise GitIOError(exc) from exc


def read_blob(hash_object: HashArg, path_objects: PathArg) -> Blob:
    """Load the blob with the given hash."""
    obj_type, _, content = parse_object(hash_object, path_objects)
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError:
        raise FormatError(f"invalid_content in blob object {hash_object}") from None
    if obj_type is not ObjectType.BLOB:
        raise ObjectTypeError("blob", str(obj_type))
    return Blob(text)


def hash_object_command(args: Iterable[str], path_objects: PathArg) -> GitHash:
    """Hash a file as an object, store it when '-w' is given, print the hash."""
    path, obj_type, write = parse_hash_object_args(args)
    if not path.exists():
        raise InexistentPath(path)
    try:
        content = path.read_bytes()
    except OSError as exc:
        raise GitIOError(exc) from exc

    obj_type = obj_type or ObjectType.BLOB
    hash_value = GitHash.hash_object(content, obj_type)
    if write:
        save_object(content, obj_type, path_objects)
    print(hash_value)
    return hash_value