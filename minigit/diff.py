"""Line-based diff built on the longest common subsequence of lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence


class ModificationType(Enum):
    """What happened to a line between two texts."""

    SAME = "same"
    ADD = "add"
    REMOVE = "remove"


@dataclass(frozen=True)
class LineChange:
    """A line together with what happened to it."""

    kind: ModificationType
    line: str


def _lines(text: str) -> List[str]:
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


def longest_common_line_subsequence(
    lines1: Sequence[str], lines2: Sequence[str]
) -> List[str]:
    """Return the longest subsequence of lines shared by both sequences."""
    len1, len2 = len(lines1), len(lines2)
    matrix = [[0] * (len2 + 1) for _ in range(len1 + 1)]
    for i, a in enumerate(lines1, start=1):
        row, prev = matrix[i], matrix[i - 1]
        for j, b in enumerate(lines2, start=1):
            if a == b:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])

    lcs: List[str] = []
    i, j = len1, len2
    while i > 0 and j > 0:
        if lines1[i - 1] == lines2[j - 1]:
            lcs.append(lines1[i - 1])
            i -= 1
            j -= 1
        elif matrix[i - 1][j] > matrix[i][j - 1]:
            i -= 1
        else:
            j -= 1
    lcs.reverse()
    return lcs


def diff(original: str, modified: str) -> List[LineChange]:
    """Describe how modified differs from original, line by line."""
    original_lines = _lines(original)
    modified_lines = _lines(modified)
    result: List[LineChange] = []
    i = j = 0

    for line in longest_common_line_subsequence(original_lines, modified_lines):
        while i < len(original_lines) and original_lines[i] != line:
            result.append(LineChange(ModificationType.REMOVE, original_lines[i]))
            i += 1
        while j < len(modified_lines) and modified_lines[j] != line:
            result.append(LineChange(ModificationType.ADD, modified_lines[j]))
            j += 1
        result.append(LineChange(ModificationType.SAME, line))
        i += 1
        j += 1

    result.extend(
        LineChange(ModificationType.REMOVE, rest) for rest in original_lines[i:]
    )
    result.extend(LineChange(ModificationType.ADD, rest) for rest in modified_lines[j:])
    return result