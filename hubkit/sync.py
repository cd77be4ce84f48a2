"""Pieces of the branch synchronisation command."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

_BRANCH_REMOTE_RE = re.compile(r"^branch\.(.+?)\.remote (.+)")


@dataclass(frozen=True)
class SyncColors:
    """Terminal escape sequences used in sync reports."""

    green: str = ""
    light_green: str = ""
    red: str = ""
    light_red: str = ""
    reset: str = ""

    @classmethod
    def for_output(cls, colorize: bool) -> "SyncColors":
        """Return ANSI colors when ``colorize`` is true, else empty strings."""
        if not colorize:
            return cls()
        return cls(
            green="\033[32m",
            light_green="\033[32;1m",
            red="\033[31m",
            light_red="\033[31;1m",
            reset="\033[0m",
        )


def parse_branch_remotes(lines: Iterable[str]) -> dict[str, str]:
    """Map branch names to remotes from ``git config --get-regexp`` lines."""
    result: dict[str, str] = {}
    for line in lines:
        match = _BRANCH_REMOTE_RE.match(line)
        if match:
            result[match.group(1)] = match.group(2)
    return result


def updated_message(branch: str, sha: str, colors: SyncColors) -> str:
    """Report line for a branch that was fast-forwarded from ``sha``."""
    return (
        f"{colors.green}Updated branch {colors.light_green}{branch}"
        f"{colors.reset} (was {sha[:7]})."
    )


def deleted_message(branch: str, sha: str, colors: SyncColors) -> str:
    """Report line for a merged branch that was deleted at ``sha``."""
    return (
        f"{colors.red}Deleted branch {colors.light_red}{branch}"
        f"{colors.reset} (was {sha[:7]})."
    )