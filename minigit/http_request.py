"""Parsing of HTTP requests made to the pull-request API."""

from __future__ import annotations

import json
from typing import BinaryIO, Dict, Iterable, List, Optional, Sequence, TextIO, Tuple, Union

from minigit.errors import BadRequest, GitIOError, ProtocolError, RepositoryError

BODY_METHODS = ("POST", "PUT", "PATCH")

Reader = Union[BinaryIO, TextIO]


def parse_headers(lines: Iterable[str]) -> Dict[str, str]:
    """Turn 'Field: value' lines into a mapping of field to value."""
    headers: Dict[str, str] = {}
    for line in lines:
        field, sep, value = line.partition(": ")
        if not sep:
            raise BadRequest(f"Invalid http request header: {line}")
        headers[field] = value
    return headers


def parse_query(uri_end: str) -> Dict[str, str]:
    """Return the 'field=value' pairs after the '?' of a URI segment."""
    queries: Dict[str, str] = {}
    _, sep, text = uri_end.partition("?")
    if not sep:
        return queries
    for query in text.split("&"):
        field, eq, value = query.partition("=")
        if not eq:
            raise BadRequest(f"Invalid query format: {query}")
        queries[field] = value
    return queries


def verify_request_validity(
    body: Optional[str], method: str, uri: str, uri_parts: Sequence[str]
) -> str:
    """Check the URI targets /repos/<repo>/pulls and that a body is present where needed.

    Returns the body, or an empty string for methods that take none.
    """
    if not uri.startswith("/repos/") or len(uri_parts) < 4 or "pulls" not in uri_parts[3]:
        raise BadRequest("Invalid URI request")
    if body is not None:
        return body
    if method in BODY_METHODS:
        raise BadRequest("POST, PUT and PATCH must include a body")
    return ""


def read_full_request(reader: Reader) -> List[str]:
    """Read the request line and headers, up to the first empty line or end of stream."""
    lines: List[str] = []
    while True:
        try:
            raw = reader.readline()
        except (UnicodeDecodeError, OSError):
            raise ProtocolError("Invalid http request line") from None
        if not raw:
            break
        if isinstance(raw, bytes):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError:
                raise ProtocolError("Invalid http request line") from None
        else:
            line = raw
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        if not line:
            break
        lines.append(line)
    return lines


def read_request_body(reader: BinaryIO, content_length: int) -> str:
    """Read exactly content_length bytes of body and decode them as UTF-8."""
    chunks: List[bytes] = []
    remaining = content_length
    try:
        while remaining > 0:
            chunk = reader.read(remaining)
            if not chunk:
                raise GitIOError("failed to fill whole buffer")
            chunks.append(chunk)
            remaining -= len(chunk)
    except OSError as exc:
        raise GitIOError(exc) from exc
    try:
        return b"".join(chunks).decode("utf-8")
    except UnicodeDecodeError:
        raise BadRequest("Invalid HTTP request body") from None


def parse_json_create_body(json_body: str) -> Tuple[str, str, Optional[str]]:
    """Read (base, head, title) from the JSON body of a pull-request creation."""
    try:
        values = json.loads(json_body)
    except (ValueError, TypeError):
        raise RepositoryError("Error deserializing http request body") from None
    if not isinstance(values, dict):
        values = {}

    base_name = values.get("base")
    if not isinstance(base_name, str):
        raise RepositoryError("Error reading branch_base from http request body")
    target_name = values.get("head")
    if not isinstance(target_name, str):
        raise RepositoryError("Error reading branch_target from http request body")
    title = values.get("title")
    return base_name, target_name, title if isinstance(title, str) else None