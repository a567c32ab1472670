"""One tracked file as recorded by a line of the index."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from minigit.errors import FileNotFoundInRepo, FormatError, GitIOError
from minigit.git_object import save_blob
from minigit.hashing import GitHash

PathArg = Union[str, "os.PathLike[str]"]

DATE_FORMAT = "%Y/%m/%d-%H:%M:%S"
_NO_HASH = "None"


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise GitIOError(exc) from exc


def date_modified_as_string(path: PathArg) -> str:
    """Return the UTC modification time of a file in the index date format."""
    try:
        mtime = os.stat(path).st_mtime
    except OSError as exc:
        raise GitIOError(exc) from exc
    return datetime.fromtimestamp(mtime, tz=timezone.utc).strftime(DATE_FORMAT)


def current_blob_hash(path: PathArg) -> GitHash:
    """Return the blob hash of the file as it is in the working directory."""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundInRepo(str(path))
    return GitHash.hash_blob(_read_bytes(file_path))


@dataclass
class IndexFileInfo:
    """Path, modification date and blob hashes of a tracked file.

    previous_blob_hash is set while the file has changes added since the
    last commit and is None otherwise.
    """

    path: Path
    mod_date: str
    current_blob_hash: GitHash
    previous_blob_hash: Optional[GitHash] = None

    @classmethod
    def from_working_dir(cls, local_path: PathArg, home_path: PathArg) -> IndexFileInfo:
        """Describe a file of the working directory as newly added."""
        global_path = Path(home_path) / local_path
        if not global_path.exists():
            raise FileNotFoundInRepo(str(global_path))
        mod_date = date_modified_as_string(global_path)
        blob_hash = current_blob_hash(global_path)
        # A new file counts as added since the last commit until it is committed.
        return cls(Path(local_path), mod_date, blob_hash, blob_hash)

    @classmethod
    def from_line(cls, line: str) -> IndexFileInfo:
        """Parse 'path modification_date current_blob_hash previous_blob_hash'."""
        fields = line.split(" ")
        if len(fields) != 4:
            raise FormatError(
                "the format for file index is:'path modification_date "
                "current_blob_hash previous_blob_hash' separated by spaces."
                "Previous blob hash may be None"
            )
        path, mod_date, current, previous = fields
        return cls(
            Path(path),
            mod_date,
            GitHash(current),
            None if previous == _NO_HASH else GitHash(previous),
        )

    def verify_change(self, path_objects: PathArg, home_path: PathArg) -> None:
        """Record a change made in the working directory since the last add."""
        global_path = Path(home_path) / self.path
        current_date = date_modified_as_string(global_path)
        if current_date == self.mod_date:
            return
        self.mod_date = current_date

        new_content = _read_bytes(global_path)
        new_hash = GitHash.hash_blob(new_content)
        if new_hash == self.current_blob_hash:
            return
        if self.previous_blob_hash is not None and self.previous_blob_hash == new_hash:
            # Back to the committed state.
            self.previous_blob_hash = None
            self.current_blob_hash = new_hash
            return
        self.previous_blob_hash = self.current_blob_hash
        self.current_blob_hash = new_hash
        save_blob(new_content, path_objects)

    def to_index_line(self) -> str:
        """Return the index line for this file, newline included."""
        previous = (
            _NO_HASH if self.previous_blob_hash is None else str(self.previous_blob_hash)
        )
        return f"{self.path} {self.mod_date} {self.current_blob_hash} {previous}\n"

    def save(self, path_objects: PathArg, home_path: PathArg) -> GitHash:
        """Store the file's current content as a blob object."""
        return save_blob(_read_bytes(Path(home_path) / self.path), path_objects)

    def has_changed(self, home_path: PathArg) -> bool:
        """Tell whether the working copy differs from the recorded blob."""
        return current_blob_hash(Path(home_path) / self.path) != self.current_blob_hash

    def added_since_commit(self) -> bool:
        return self.previous_blob_hash is not None

    def reset_previous_blob_hash(self) -> None:
        self.previous_blob_hash = None