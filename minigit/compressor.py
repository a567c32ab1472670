"""Zlib compression of object contents."""

from __future__ import annotations

import zlib
from typing import BinaryIO, Union

from minigit.errors import GitIOError

_CHUNK = 64 * 1024


def compress(content: bytes) -> bytes:
    """Compress content with zlib at the default level."""
    return zlib.compress(bytes(content))


def uncompress(readable: Union[BinaryIO, bytes, bytearray]) -> bytes:
    """Decompress a whole zlib stream read from a binary file or bytes."""
    decoder = zlib.decompressobj()
    parts = []
    try:
        if isinstance(readable, (bytes, bytearray, memoryview)):
            parts.append(decoder.decompress(bytes(readable)))
        else:
            for chunk in iter(lambda: readable.read(_CHUNK), b""):
                parts.append(decoder.decompress(chunk))
        parts.append(decoder.flush())
    except zlib.error as exc:
        raise GitIOError(exc) from exc
    if not decoder.eof:
        raise GitIOError("corrupt deflate stream")
    return b"".join(parts)