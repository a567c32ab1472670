"""Operation log lines and writing them to a log file."""

from __future__ import annotations

import os
import queue as queue_module
import sys
from datetime import datetime
from typing import Iterable, Optional, TextIO, Union

from minigit.config import RepoConfig
from minigit.errors import ConfigError, GitError

PathArg = Union[str, "os.PathLike[str]"]

SEPARATOR = "; "
SEPARATOR_USER = " - "
SEPARATOR_ARGS = " "
NOT_ARGS = ""
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def _current_date_time() -> str:
    return datetime.now().strftime(TIME_FORMAT)


def _open_log(file_path: PathArg) -> Optional[TextIO]:
    try:
        return open(file_path, "a", encoding="utf-8")
    except OSError as exc:
        print(exc, file=sys.stderr)
        return None


def _write_all(file_path: PathArg, lines: Iterable[str]) -> None:
    log = _open_log(file_path)
    if log is None:
        return
    with log:
        for text in lines:
            try:
                log.write(f"{text}\n")
                log.flush()
            except OSError as exc:
                print(exc, file=sys.stderr)


def write_log_lines(file_path: PathArg, text_lines: Iterable[str]) -> None:
    """Append the lines to the log file; failures are reported on stderr."""
    _write_all(file_path, text_lines)


def write_logs_from_queue(file_path: PathArg, queue: "queue_module.Queue") -> None:
    """Append lines taken from queue until it yields None."""
    _write_all(file_path, iter(queue.get, None))


def _send_info(result: str, command: str, text_extra: str, path_config: PathArg) -> str:
    try:
        user = user_data(path_config)
    except GitError:
        user = "No data user in config."
    return SEPARATOR.join([result, _current_date_time(), user, command, text_extra])


def log_text_initial(command: str, args: Iterable[str], path_config: PathArg) -> str:
    """Return the log line written when a command starts."""
    args = list(args)
    text = SEPARATOR_ARGS.join(args) if args else NOT_ARGS
    return _send_info("EXEC", command, text, path_config)


def log_text_finish(command: str, text: str, path_config: PathArg, is_ok: bool) -> str:
    """Return the log line written when a command ends."""
    return _send_info("OK" if is_ok else "ERROR", command, text, path_config)


def user_data(path_config: PathArg) -> str:
    """Return 'Name=<name> - Mail=<mail>' from the repository config."""
    user = RepoConfig.open(path_config).get_user()
    if user is None:
        raise ConfigError("Error not data user yet.")
    name, mail = user
    return f"Name={name}{SEPARATOR_USER}Mail={mail}"


def server_log_line(type_of_message: str, text: str, user: str) -> str:
    """Return a server log line: type, time, user and text."""
    return SEPARATOR.join([type_of_message, _current_date_time(), user, text])


def send_info_from_server(
    type_of_message: str, text: str, user: str, queue: "queue_module.Queue"
) -> str:
    """Put a server log line on queue and return it."""
    line = server_log_line(type_of_message, text, user)
    try:
        queue.put_nowait(line)
    except queue_module.Full as exc:
        print(f"Error, send log (server): {exc!r}", file=sys.stderr)
    return line


def send_info_from_client_http(
    is_info: bool, text: str, queue: "queue_module.Queue"
) -> str:
    """Put an INFO or ERROR line for an HTTP client on queue and return it."""
    return send_info_from_server("INFO" if is_info else "ERROR", text, "CLIENT", queue)