"""File contents stored as blob objects."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

from minigit.errors import GitIOError
from minigit.hashing import GitHash


@dataclass
class Blob:
    """The text content of a file."""

    content: str

    def write_to_working_directory(self, path: Union[str, "os.PathLike[str]"]) -> None:
        """Write the content to path, replacing what was there."""
        try:
            with open(path, "wb") as file:
                file.write(self.content.encode("utf-8"))
        except OSError as exc:
            raise GitIOError(exc) from exc

    def get_hash(self) -> GitHash:
        """Return the blob object hash of the content."""
        return GitHash.hash_blob(self.content.encode("utf-8"))