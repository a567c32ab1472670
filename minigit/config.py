"""Per-repository configuration: the user's name and mail."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from minigit.errors import (
    FormatError,
    GitIOError,
    IncorrectOptionAmount,
    RepositoryError,
    UnknownOption,
)

PathArg = Union[str, "os.PathLike[str]"]

USER_NAME_CATEGORY = "user_name:"
USER_MAIL_CATEGORY = "user_mail:"

TEST_USER_NAME = "test_username"
TEST_USER_MAIL = "test_username@example.com"


@dataclass
class RepoConfig:
    """The configuration file of a repository and the values it holds."""

    path_config: Path
    user_name: Optional[str] = None
    user_mail: Optional[str] = None

    @classmethod
    def open(cls, path_config: PathArg) -> RepoConfig:
        """Read the configuration file at path_config."""
        path = Path(path_config)
        if not path.exists():
            raise RepositoryError(
                "Couldn't find config in default path ('.minigit/config')"
            )
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise GitIOError(exc) from exc

        config = cls(path)
        for line in text.splitlines():
            category, sep, value = line.partition(" ")
            if not sep:
                continue
            if category == USER_NAME_CATEGORY:
                config.user_name = value
            elif category == USER_MAIL_CATEGORY:
                config.user_mail = value
            else:
                raise FormatError(f"Invalid category '{category}' in .minigit/config")
        return config

    def get_user(self) -> Optional[Tuple[str, str]]:
        """Return (name, mail) when both are set, otherwise None."""
        if self.user_name is None or self.user_mail is None:
            return None
        return self.user_name, self.user_mail

    def save(self) -> None:
        """Write the configuration back to its file."""
        lines = []
        if self.user_name is not None:
            lines.append(f"{USER_NAME_CATEGORY} {self.user_name}\n")
        if self.user_mail is not None:
            lines.append(f"{USER_MAIL_CATEGORY} {self.user_mail}\n")
        try:
            self.path_config.write_text("".join(lines), encoding="utf-8")
        except OSError as exc:
            raise GitIOError(exc) from exc


def config_command(path_config: PathArg, args: Iterable[str]) -> str:
    """Set user name and mail from '--user-name <name> --user-mail <mail>'.

    '--test' sets a fixed test user and stops reading arguments.
    """
    args = list(args)
    if not args:
        raise IncorrectOptionAmount(1, 0)
    config = RepoConfig.open(path_config)

    pending: Optional[str] = None
    result: List[str] = []
    for arg in args:
        if not arg:
            continue
        if pending is not None:
            if pending == "--user-name":
                config.user_name = arg
                result.append(f"Set user name {arg}.")
            elif pending == "--user-mail":
                config.user_mail = arg
                result.append(f"Set user mail {arg}.")
            else:
                raise UnknownOption("--user-name or --user-mail", pending)
            pending = None

        if arg.startswith("-"):
            if arg == "--test":
                config.user_name = TEST_USER_NAME
                config.user_mail = TEST_USER_MAIL
                break
            pending = arg

    config.save()
    return " ".join(result)