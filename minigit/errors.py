"""Exception hierarchy for repository, command and HTTP failures."""

from __future__ import annotations

from os import PathLike


class GitError(Exception):
    """Base class for every error raised by the package."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class GitIOError(GitError):
    """Reading or writing a file failed."""

    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__(f"ERROR:[Error while reading or writing to file: {cause}]")


class ParseError(GitError):
    """A string or byte sequence could not be parsed."""

    def __init__(self, detail: object, *, utf8: bool = False) -> None:
        self.detail = detail
        self.utf8 = utf8
        kind = "from u8 to utf8" if utf8 else "from string to int"
        self.description = f"{kind}: {detail}"
        super().__init__(f"ERROR[couldn't parse {self.description}]")


class FormatError(GitError):
    """A repository file has an invalid format."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"ERROR:[Error in file format: {detail}]")


class FileNotFoundInRepo(GitError):
    """A given path does not match any file."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"ERROR:[The given path does not match any files: {path}]")


class FileNotInIndex(GitError):
    """A path is not tracked by the index."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"ERROR:[The given path {path} is not included in the index file]"
        )


class InvalidPath(GitError):
    """A path name is not valid."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"ERROR:[Invalid path name: {path}]")


class InvalidHash(GitError):
    """A hash does not have the required 40 characters."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"ERROR:[Invalid hash '{value}'. Hashes must be 40 characters long]"
        )


class RepositoryError(GitError):
    """The repository structure or state does not allow the operation."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"ERROR[{detail}]")


class ConfigError(GitError):
    """The repository configuration is missing or wrong."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"ERROR:[Configuration error: {detail}]")


class ObjectTypeError(GitError):
    """An object had a different type than expected."""

    def __init__(self, expected: str, got: str) -> None:
        self.expected = expected
        self.got = got
        super().__init__(f"ERROR:[Wrong ObjectType. Expected {expected}, got {got}]")


class ProtocolError(GitError):
    """The wire protocol was violated."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Error[git-protocol: {detail}]")


class CommandError(GitError):
    """Base class for errors in the user's command input."""


class UnknownOption(CommandError):
    """An option is not among the allowed ones."""

    def __init__(self, expected: str, received: str) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            f"ERROR:[Error in option. Received: {received}, allowed: {expected}]"
        )


class IncorrectAmount(CommandError):
    """The number of parameters is wrong."""

    def __init__(self, expected: str, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            "ERROR:[Error in amount of parameters sent. "
            f"Expected {expected}, got {received}]"
        )


class IncorrectOptionAmount(CommandError):
    """The number of options is wrong."""

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            "ERROR:[Error in amount of options sent. "
            f"Expected {expected}, got {received}]"
        )


class InvalidHashArgument(CommandError):
    """A hash given on the command line is wrong."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"ERROR:[Error in hash passed: {detail}]")


class InvalidBranch(CommandError):
    """A branch given on the command line is wrong."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"ERROR[Invalid branch input: {detail}]")


class CommandFormatError(CommandError):
    """A command is badly formed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"ERROR[Error in command format.{detail}]")


class InexistentPath(CommandError):
    """A path given as argument does not exist."""

    def __init__(self, path: str | PathLike[str]) -> None:
        self.path = path
        super().__init__(f"ERROR[Inexistent path passed as argument: {path}]")


class InvalidArgument(CommandError):
    """An argument is not valid."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"ERROR[Invalid argument: {detail}]")


class HTTPError(GitError):
    """Base class for errors answered with an HTTP error status."""

    status = "500 Internal Server Error"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        self.description = f"{self.status}: {detail}"
        super().__init__(f"ERROR[{self.description}]")


class BadRequest(HTTPError):
    """The HTTP request is malformed."""

    status = "400 Bad Request"


class NotFound(HTTPError):
    """The requested resource does not exist."""

    status = "404 Not Found"


class MethodNotAllowed(HTTPError):
    """The HTTP method is not supported."""

    status = "405 Method Not Allowed"