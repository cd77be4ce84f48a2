"""Local files to be attached to a release, and messages about them."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from typing import BinaryIO


@dataclass
class LocalAsset:
    """A local file opened for upload as a release asset."""

    name: str
    label: str
    size: int
    contents: BinaryIO


def pluralize(count: int, label: str) -> str:
    """Return ``label`` for a count of one, otherwise its plural."""
    return label if count == 1 else f"{label}s"


def parse_asset_arg(arg: str) -> tuple[str, str]:
    """Split a ``<filename>#<label>`` argument into path and label.

    Only the first ``#`` separates; the label is empty when there is none.
    """
    path, _, label = arg.partition("#")
    return path, label


@contextmanager
def open_asset_files(args: Iterable[str]) -> Iterator[list[LocalAsset]]:
    """Open every file named in ``args`` and yield them as assets.

    All files are closed when the block ends, or as soon as one of them
    fails to open, in which case the error propagates.
    """
    with ExitStack() as stack:
        assets: list[LocalAsset] = []
        for arg in args:
            path, label = parse_asset_arg(arg)
            handle = stack.enter_context(open(path, "rb"))
            size = os.fstat(handle.fileno()).st_size
            assets.append(LocalAsset(name=path, label=label, size=size, contents=handle))
        yield assets


def join_messages(messages: Iterable[str]) -> str:
    """Join several ``--message`` values with a blank line between them."""
    return "\n\n".join(messages)


def create_retry_hint(tag_name: str, failed_names: list[str]) -> str:
    """Explain a partly failed upload after creating a release, with a retry command."""
    count = len(failed_names)
    flags = " ".join(f"-a {name}" for name in failed_names)
    return (
        f"The release was created, but attaching {count} "
        f"{pluralize(count, 'asset')} failed. "
        f"You can retry with:\nhub release edit {tag_name} -m '' {flags}\n\n"
    )