"""Kinds of objects stored in the object database."""

from __future__ import annotations

from enum import Enum

from minigit.errors import ObjectTypeError


class ObjectType(Enum):
    """The three object kinds: commit, blob and tree."""

    COMMIT = "commit"
    BLOB = "blob"
    TREE = "tree"

    def __str__(self) -> str:
        return self.value

    def add_header(self, content: bytes) -> bytes:
        """Prefix content with the '<type> <size>\\0' object header."""
        return f"{self.value} {len(content)}\0".encode() + bytes(content)

    @classmethod
    def from_name(cls, name: str) -> ObjectType:
        """Return the type named by name, or raise ObjectTypeError."""
        try:
            return cls(name)
        except ValueError:
            raise ObjectTypeError("tree, blob or commit", name) from None