"""The staging area: which files are tracked and with what content."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import (
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    TextIO,
    Tuple,
    Union,
)

from minigit.errors import (
    FileNotFoundInRepo,
    FileNotInIndex,
    GitIOError,
    RepositoryError,
)
from minigit.hashing import GitHash
from minigit.ignore import get_ignored_files
from minigit.index_file_info import IndexFileInfo

PathArg = Union[str, "os.PathLike[str]"]

IGNORE_FILE_NAME = ".gitignore"
REPO_DIR_NAME = ".minigit"

UP_TO_DATE = "Up to date. Nothing to commit."


@dataclass
class Status:
    """Files of the working directory grouped by their state."""

    untracked: List[Path] = field(default_factory=list)
    not_staged: List[Path] = field(default_factory=list)
    staged: List[Path] = field(default_factory=list)

    def __iter__(self) -> Iterator[List[Path]]:
        yield self.untracked
        yield self.not_staged
        yield self.staged

    def is_clean(self) -> bool:
        return not (self.untracked or self.not_staged or self.staged)


@dataclass
class Index:
    """Tracked files, keyed by their path relative to the repository home."""

    files: Dict[Path, IndexFileInfo] = field(default_factory=dict)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, (str, os.PathLike)) and Path(path) in self.files

    def __len__(self) -> int:
        return len(self.files)

    @classmethod
    def open(cls, path_index: PathArg) -> Index:
        """Read the index file at path_index."""
        try:
            with open(path_index, "r", encoding="utf-8") as stream:
                return cls.from_stream(stream)
        except (OSError, UnicodeDecodeError) as exc:
            raise GitIOError(exc) from exc

    @classmethod
    def from_stream(cls, stream: Iterable[Union[str, bytes]]) -> Index:
        """Build an index from the lines of a text stream, one file per line."""
        index = cls()
        for raw in stream:
            line = raw.decode("utf-8") if isinstance(raw, bytes) else raw
            if line.endswith("\n"):
                line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
            info = IndexFileInfo.from_line(line)
            index.files[info.path] = info
        return index

    def as_files_vector(self) -> List[IndexFileInfo]:
        """Return the entries of every tracked file."""
        return list(self.files.values())

    def reset_previous_blob_hash(self) -> None:
        """Mark every file as committed, so none shows as added since commit."""
        for info in self.files.values():
            info.reset_previous_blob_hash()

    def save(self, stream: TextIO) -> None:
        """Write the index lines to stream."""
        try:
            stream.write("".join(info.to_index_line() for info in self.files.values()))
        except OSError as exc:
            raise GitIOError(exc) from exc

    def add(self, file_path: PathArg, home_path: PathArg, path_objects: PathArg) -> None:
        """Track a file, or record its changes if it is already tracked."""
        key = Path(file_path)
        info = self.files.get(key)
        if info is not None:
            info.verify_change(path_objects, home_path)
            return
        info = IndexFileInfo.from_working_dir(key, home_path)
        info.save(path_objects, home_path)
        self.files[info.path] = info

    def remove(self, path: PathArg) -> None:
        """Stop tracking a file."""
        key = Path(path)
        if self.files.pop(key, None) is None:
            raise FileNotInIndex(f"ERROR {key} not in the index.")

    def status(self, home_path: PathArg, path_ignore: PathArg) -> Status:
        """Group the working directory's files into untracked, not staged and staged."""
        ignored = get_ignored_files(path_ignore)
        result = Status()
        for file_path in list_dir_file_paths(home_path):
            if file_path in ignored:
                continue
            info = self.files.get(file_path)
            if info is None:
                result.untracked.append(file_path)
            elif info.has_changed(home_path):
                result.not_staged.append(file_path)
            elif info.added_since_commit():
                result.staged.append(file_path)
        return result

    def update_to_working_dir(
        self,
        working_dir_files: Iterable[Tuple[PathArg, GitHash]],
        home_path: PathArg,
    ) -> None:
        """Drop entries whose files are gone and re-read the given files."""
        home = Path(home_path)
        for info in self.as_files_vector():
            if not (home / info.path).exists():
                self.remove(info.path)
        for local_path, _ in working_dir_files:
            info = IndexFileInfo.from_working_dir(local_path, home)
            self.files[Path(local_path)] = info

    def check_for_changes(self, path_home: PathArg, path_ignore: PathArg) -> None:
        """Raise RepositoryError if anything is untracked, not staged or staged."""
        if not self.status(path_home, path_ignore).is_clean():
            raise RepositoryError(
                "There's uncommited changes either tracked in index or not.\n"
                "Add and commit or delete them before continuing"
            )


def _write_index(index: Index, path_index: PathArg) -> None:
    try:
        with open(path_index, "w", encoding="utf-8") as stream:
            index.save(stream)
    except OSError as exc:
        raise GitIOError(exc) from exc


def add_command(
    file_paths: Sequence[str],
    path_home: PathArg,
    path_index: PathArg,
    path_objects: PathArg,
) -> None:
    """Add the given files, relative to path_home, to the index."""
    home = Path(path_home)
    for file_path in file_paths:
        full = home / file_path
        if not full.exists():
            raise FileNotFoundInRepo(str(full))
    index = Index.open(path_index)
    for file_path in file_paths:
        index.add(Path(file_path), home, path_objects)
    _write_index(index, path_index)


def rm_command(file_paths: Iterable[str], path_index: PathArg) -> None:
    """Remove the given files from the index."""
    index = Index.open(path_index)
    for file_path in file_paths:
        index.remove(Path(file_path))
    _write_index(index, path_index)


def list_dir_file_paths(repo_home_path: PathArg) -> List[Path]:
    """List files under the home, relative to it, skipping repository data."""
    home = Path(repo_home_path)
    files: List[Path] = []

    def walk(directory: Path) -> None:
        try:
            entries = sorted(directory.iterdir())
        except OSError as exc:
            raise GitIOError(exc) from exc
        for entry in entries:
            if entry.is_file():
                if entry.name == IGNORE_FILE_NAME:
                    continue
                try:
                    files.append(entry.relative_to(home))
                except ValueError:
                    files.append(entry)
            elif entry.is_dir():
                if entry.name == REPO_DIR_NAME:
                    continue
                walk(entry)

    walk(home)
    return files


def format_status(
    branch_name: Optional[str],
    untracked: Sequence[PathArg],
    not_staged: Sequence[PathArg],
    staged: Sequence[PathArg],
) -> str:
    """Print the status report and return a one-line summary of it."""
    if branch_name is not None:
        print(f"On branch {branch_name}")
    else:
        print("Not currently on any branch.")
    if not untracked and not not_staged and not staged:
        print(UP_TO_DATE)
        return UP_TO_DATE

    changes = ["Exist files:"]
    if staged:
        print("Changes to be commited:")
        for file in staged:
            print(f"\t{file}")
        print()
        changes.append("To be commited.")
    if not_staged:
        print(
            "Changes not staged for commit:\n"
            "    (Use 'minigit add <file>...' to update what will be commited)"
        )
        for file in not_staged:
            print(f"\t{file}")
        print()
        changes.append("Not staged for commit.")
    if untracked:
        print(
            "Untracked files:\n"
            "    (Use 'minigit add <file>' to include in what will be commited)"
        )
        for file in untracked:
            print(f"\t{file}")
        print()
        changes.append("Untracked.")
    if not staged:
        print("nothing added to commit (use 'minigit add <file>')")
    return " ".join(changes)