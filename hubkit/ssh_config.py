"""Reading host aliases from OpenSSH client configuration files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

SSHConfig = dict[str, str]

_HOST_RE = re.compile(r"^[ \t]*(host|hostname)[ \t]+(.+)$", re.IGNORECASE)
_TOKEN_RE = re.compile(r"%[%h]")

_SYSTEM_CONFIG_FILES = ("/etc/ssh_config", "/etc/ssh/ssh_config")


def default_config_files() -> list[str]:
    """Return the SSH config files to consult, the user's own file first."""
    files = list(_SYSTEM_CONFIG_FILES)
    try:
        home = Path.home()
    except RuntimeError:
        return files
    return [str(home / ".ssh" / "config"), *files]


def expand_tokens(text: str, host: str) -> str:
    """Expand the ``%h`` and ``%%`` tokens of an SSH config value."""
    return _TOKEN_RE.sub(lambda m: host if m.group() == "%h" else "%", text)


def _lines(path: str):
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        for line in handle:
            line = line.removesuffix("\n").removesuffix("\r")
            yield line


@dataclass
class SSHConfigReader:
    """Collects ``Host`` to ``Hostname`` mappings from a list of files."""

    files: list[str] = field(default_factory=default_config_files)

    def read(self) -> SSHConfig:
        """Read every file in order; unreadable files are skipped."""
        config: SSHConfig = {}
        for filename in self.files:
            try:
                self._read_file(config, filename)
            except OSError:
                continue
        return config

    @staticmethod
    def _read_file(config: SSHConfig, filename: str) -> None:
        hosts = ["*"]
        for line in _lines(filename):
            match = _HOST_RE.match(line)
            if match is None:
                continue
            names = match.group(2).split()
            if match.group(1).lower() == "host":
                hosts = names
                continue
            for host in hosts:
                for name in names:
                    config[host] = expand_tokens(name, host)