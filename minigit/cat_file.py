"""Show the content, size or type of a stored object."""

from __future__ import annotations

import os
import zlib
from pathlib import Path
from typing import Union

from minigit.errors import FormatError, GitIOError, InvalidHashArgument, UnknownOption

DEFAULT_OBJECTS_DIR = ".minigit/objects"

PathArg = Union[str, "os.PathLike[str]"]


def cat_file(option: str, hash_object: str, directory: PathArg = DEFAULT_OBJECTS_DIR) -> str:
    """Answer '-p' (content), '-s' (size) or '-t' (type) for an object."""
    if len(hash_object) != 40:
        raise InvalidHashArgument("Hash length must be 40")
    handlers = {"-p": object_content, "-s": object_size, "-t": object_type}
    handler = handlers.get(option)
    if handler is None:
        raise UnknownOption("-p, -s or -t", option)
    return handler(hash_object, directory)


def object_content(hash_object: str, directory: PathArg) -> str:
    """Return the object content that follows the header."""
    return decode_object(hash_object, directory).split("\0")[-1]


def object_size(hash_object: str, directory: PathArg) -> str:
    """Return the size field of the object header."""
    header = decode_object(hash_object, directory).split("\0")[0]
    words = header.split()
    if not words:
        raise FormatError("without separation by whitespace character.")
    return words[-1]


def object_type(hash_object: str, directory: PathArg) -> str:
    """Return the type field of the object header."""
    words = decode_object(hash_object, directory).split()
    if not words:
        raise FormatError("without separation by whitespace character.")
    return words[0]


def decode_object(hash_object: str, directory: PathArg) -> str:
    """Return the decompressed object, header included, as text."""
    path = Path(directory) / hash_object[:2] / hash_object[2:]
    if not path.exists():
        raise InvalidHashArgument(f"{hash_object} not in objects")
    try:
        return zlib.decompress(path.read_bytes()).decode("utf-8")
    except (OSError, zlib.error, UnicodeDecodeError) as exc:
        raise GitIOError(exc) from exc