"""Helpers for interpreting the output and settings of git commands."""

from __future__ import annotations

import os
import posixpath
from dataclasses import dataclass

_COMMENT_CHAR_CANDIDATES = "#;@!$%^&|:"


@dataclass(frozen=True)
class Range:
    """A pair of resolved revisions."""

    a: str
    b: str

    def is_identical(self) -> bool:
        """Whether both ends name the same commit."""
        return self.a.casefold() == self.b.casefold()


def output_lines(output: str) -> list[str]:
    """Split command output into lines, ignoring one trailing newline."""
    output = output.removesuffix("\n")
    return output.split("\n") if output else []


def first_line(output: str) -> str:
    """Return the output up to its first newline."""
    return output.partition("\n")[0]


def select_comment_char(text: str, configured: str | None) -> str:
    """Choose the comment character for a message.

    ``configured`` is the ``core.commentchar`` setting, or ``None`` when unset.
    With ``auto``, the first candidate that starts no line of ``text`` wins.
    """
    if configured is None:
        return "#"
    if configured != "auto":
        return configured
    lines = text.split("\n")
    for candidate in _COMMENT_CHAR_CANDIDATES:
        if not any(line.startswith(candidate) for line in lines):
            return candidate
    raise ValueError(
        "unable to select a comment character that is not used in the current message"
    )


def resolve_git_dir(git_dir: str, global_flags: list[str], cwd: str | None = None) -> str:
    """Make the git directory reported by git absolute.

    Relative paths are taken relative to the directories given by ``-C``
    global flags, and then to ``cwd`` (the process directory by default).
    """
    chdir = ""
    flags = iter(global_flags)
    for flag in flags:
        if flag != "-C":
            continue
        directory = next(flags, None)
        if directory is None:
            raise ValueError("option -C requires a directory")
        if posixpath.isabs(directory):
            chdir = directory
        else:
            chdir = posixpath.normpath(posixpath.join(chdir, directory))

    if posixpath.isabs(git_dir):
        return git_dir
    if chdir:
        git_dir = posixpath.join(chdir, git_dir)
    if not posixpath.isabs(git_dir):
        git_dir = posixpath.join(cwd if cwd is not None else os.getcwd(), git_dir)
    return posixpath.normpath(git_dir)


def parse_local_branches(output: str) -> list[str]:
    """Extract branch names from ``git branch --list`` output."""
    return [line[2:] for line in output_lines(output)]


def is_builtin_command(help_output: str, command: str) -> bool:
    """Whether ``command`` is listed in ``git help -a`` output."""
    return any(
        command in line.split(" ")
        for line in output_lines(help_output)
        if line.startswith("  ")
    )