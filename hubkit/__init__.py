"""Helpers for git remote URLs, SSH config aliases, git output, branch sync reports and releases."""

__version__ = "0.1.0"