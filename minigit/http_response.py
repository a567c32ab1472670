"""HTTP responses built from the outcome of a request."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from minigit.errors import BadRequest, MethodNotAllowed, NotFound


class HTTPStatus(Enum):
    """Status lines the server answers with."""

    OK = "200 OK"
    CREATED = "201 Created"
    BAD_REQUEST = "400 Bad Request"
    NOT_FOUND = "404 Not Found"
    METHOD_NOT_ALLOWED = "405 Method Not Allowed"
    INTERNAL_SERVER_ERROR = "500 Internal Server Error"

    def __str__(self) -> str:
        return self.value


@dataclass
class HTTPResponse:
    """Status, headers and body of a response."""

    status: HTTPStatus
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""

    @classmethod
    def from_result(
        cls, body: Optional[str], error: Optional[BaseException], method: str
    ) -> HTTPResponse:
        """Build the response for a successful body or for an error."""
        if error is None:
            status = HTTPStatus.CREATED if method == "POST" else HTTPStatus.OK
            return cls(status, {"Content-Type": "application/json"}, body or "")

        if isinstance(error, NotFound):
            status = HTTPStatus.NOT_FOUND
        elif isinstance(error, MethodNotAllowed):
            status = HTTPStatus.METHOD_NOT_ALLOWED
        elif isinstance(error, BadRequest):
            status = HTTPStatus.BAD_REQUEST
        else:
            status = HTTPStatus.INTERNAL_SERVER_ERROR
        return cls(status, {"Content-Type": "text/plain"}, str(error))

    def as_bytes(self) -> bytes:
        """Serialise the response as HTTP/1.1 wire bytes."""
        head = [f"HTTP/1.1 {self.status.value}\r\n"]
        head.extend(f"{key}: {value}\r\n" for key, value in self.headers.items())
        head.append("\r\n")
        return ("".join(head) + self.body).encode("utf-8")