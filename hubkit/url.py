"""Parsing of git remote URLs, including scp-like SSH addresses."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass, field
from urllib.parse import quote, unquote

from .ssh_config import SSHConfig, SSHConfigReader

_PROTOCOL_RE = re.compile(r"^[a-zA-Z_+-]+://")
_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_PATH_SAFE = "/:@$&+,;=~"


@dataclass
class GitURL:
    """The parts of a parsed URL."""

    scheme: str = ""
    user: str | None = None
    userinfo_tail: str | None = None
    host: str = ""
    path: str = ""
    opaque: str = ""
    query: str = ""
    fragment: str = ""

    def username(self) -> str:
        """Return the user name, or an empty string when there is none."""
        return self.user or ""

    def __str__(self) -> str:
        out = ""
        if self.opaque:
            out = f"{self.scheme}:{self.opaque}" if self.scheme else self.opaque
        else:
            if self.scheme:
                out += self.scheme + ":"
            if self.scheme or self.host or self.user is not None:
                if self.host or self.path or self.user is not None:
                    out += "//"
                if self.user is not None:
                    out += quote(self.user, safe="")
                    if self.userinfo_tail is not None:
                        out += ":" + quote(self.userinfo_tail, safe="")
                    out += "@"
                out += self.host
            path = quote(self.path, safe=_PATH_SAFE)
            if path and not path.startswith("/") and self.host:
                out += "/"
            if not out and ":" in path.split("/", 1)[0]:
                out += "./"
            out += path
        if self.query:
            out += "?" + self.query
        if self.fragment:
            out += "#" + quote(self.fragment, safe="")
        return out


def _unescape(text: str) -> str:
    if _BAD_ESCAPE_RE.search(text):
        raise ValueError(f"invalid URL escape in {text!r}")
    return unquote(text)


def _parse(raw: str) -> GitURL:
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in raw):
        raise ValueError(f"invalid control character in URL {raw!r}")

    rest, _, fragment = raw.partition("#")
    url = GitURL(fragment=_unescape(fragment))

    match = _SCHEME_RE.match(rest)
    if match:
        url.scheme = match.group(1).lower()
        rest = rest[match.end():]
    elif rest.startswith(":"):
        raise ValueError(f"missing protocol scheme in {raw!r}")

    if "?" in rest:
        rest, _, url.query = rest.partition("?")

    if url.scheme and rest and not rest.startswith("/"):
        url.opaque = rest
        return url

    if not url.scheme and ":" in rest.split("/", 1)[0]:
        raise ValueError(f"first path segment in URL cannot contain colon: {raw!r}")

    if rest.startswith("//") and (url.scheme or not rest.startswith("///")):
        authority, slash, remainder = rest[2:].partition("/")
        rest = slash + remainder
        userinfo, at, host = authority.rpartition("@")
        if at:
            name, colon, tail = userinfo.partition(":")
            url.user = _unescape(name)
            if colon:
                url.userinfo_tail = _unescape(tail)
        url.host = host

    url.path = _unescape(rest)
    return url


@dataclass
class URLParser:
    """Parses remote URLs, resolving SSH host aliases from a config."""

    ssh_config: SSHConfig = field(default_factory=dict)

    def parse(self, raw_url: str) -> GitURL:
        """Parse ``raw_url``; scp-like addresses become ``ssh`` URLs."""
        if (
            not _PROTOCOL_RE.match(raw_url)
            and ":" in raw_url
            and "\\" not in raw_url  # not a Windows path
        ):
            raw_url = "ssh://" + raw_url.replace(":", "/", 1)

        url = _parse(raw_url)
        if url.scheme == "git+ssh":
            url.scheme = "ssh"
        if url.scheme != "ssh":
            return url

        if url.path.startswith("//"):
            url.path = url.path[1:]

        host = url.host.partition(":")[0]
        ssh_host = self.ssh_config.get(host, "")
        # keep github.com when the alias only routes SSH over the HTTPS port
        ignored = host == "github.com" and ssh_host == "ssh.github.com"
        if ssh_host and not ignored:
            host = ssh_host
        url.host = host
        return url


@functools.lru_cache(maxsize=None)
def _system_ssh_config() -> tuple[tuple[str, str], ...]:
    return tuple(SSHConfigReader().read().items())


def parse_url(raw_url: str) -> GitURL:
    """Parse ``raw_url`` using the SSH config of the current user."""
    return URLParser(dict(_system_ssh_config())).parse(raw_url)