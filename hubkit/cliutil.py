"""Small helpers shared by the command-line front end."""

from __future__ import annotations

import os
import shlex
import sys


class AliasError(ValueError):
    """Raised when a git alias cannot be split into words."""


def split_alias_cmd(cmd: str) -> list[str]:
    """Split the expansion of a git alias into shell words.

    Empty aliases and shell aliases (those starting with ``!``) cannot be
    split and raise :class:`AliasError`, as do unbalanced quotes.
    """
    if not cmd:
        raise AliasError("alias can't be empty")
    if cmd.startswith("!"):
        raise AliasError("alias starting with ! can't be split")
    try:
        return shlex.split(cmd)
    except ValueError as exc:
        raise AliasError(str(exc)) from exc


def is_empty_dir(path: str | os.PathLike[str]) -> bool:
    """Whether ``path`` has no entries; a missing directory counts as empty."""
    try:
        with os.scandir(path) as entries:
            return next(entries, None) is None
    except OSError:
        return True


def msg_from_file(filename: str) -> str:
    """Read a message from ``filename``, or from standard input for ``-``.

    Windows line endings are turned into plain newlines.
    """
    if filename == "-":
        content = sys.stdin.read()
    else:
        with open(filename, encoding="utf-8", errors="replace", newline="") as handle:
            content = handle.read()
    return content.replace("\r\n", "\n")