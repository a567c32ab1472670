"""Paths listed in the ignore file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Set, Union

from minigit.errors import GitIOError

PathArg = Union[str, "os.PathLike[str]"]


def _lines(text: str) -> List[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


def get_ignored_files(path_ignore: PathArg) -> Set[Path]:
    """Return the paths in the ignore file, one per line; none if it is absent."""
    path = Path(path_ignore)
    if not path.exists():
        return set()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise GitIOError(exc) from exc
    return {Path(line) for line in _lines(text)}


def check_ignore(args: Iterable[str], path_ignore: PathArg) -> List[str]:
    """Print and return, in order, the given paths that are ignored."""
    ignored = get_ignored_files(path_ignore)
    matches = [arg for arg in args if Path(arg) in ignored]
    for arg in matches:
        print(arg)
    return matches