"""Pretty-printing of releases with git-log style format placeholders."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone

DEFAULT_FORMAT = "%T%n"

_STATE_COLORS = {"draft": "\033[33m", "pre-release": "\033[31m"}

_COLOR_NAMES = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
}
_ATTRIBUTES = {"bold": 1, "dim": 2, "ul": 4, "blink": 5, "reverse": 7}
_SHORT_COLORS = {"red": "\033[31m", "green": "\033[32m", "blue": "\033[34m", "reset": "\033[m"}

_HEX_RE = re.compile(r"x([0-9a-fA-F]{2})")
_COLOR_SPEC_RE = re.compile(r"C\(([^)]*)\)")
_SHORT_COLOR_RE = re.compile(r"C(red|green|blue|reset)")
_ESCAPES_ONLY_RE = re.compile(r"^(?:\033\[[0-9;]*m)+$")


@dataclass
class ReleaseAsset:
    """A file attached to a published release."""

    name: str = ""
    label: str = ""
    download_url: str = ""
    api_url: str = ""


@dataclass
class Release:
    """A release as reported by the hosting service."""

    tag_name: str = ""
    name: str = ""
    body: str = ""
    draft: bool = False
    prerelease: bool = False
    target_commitish: str = ""
    html_url: str = ""
    tarball_url: str = ""
    zipball_url: str = ""
    upload_url: str = ""
    created_at: datetime | None = None
    published_at: datetime | None = None
    assets: list[ReleaseAsset] = field(default_factory=list)

    def state(self) -> str:
        """Return ``draft``, ``pre-release`` or an empty string."""
        if self.draft:
            return "draft"
        if self.prerelease:
            return "pre-release"
        return ""


def _aware(moment: datetime) -> datetime:
    return moment if moment.tzinfo is not None else moment.replace(tzinfo=timezone.utc)


def _iso8601(moment: datetime) -> str:
    text = moment.isoformat(timespec="seconds")
    if moment.utcoffset() == timezone.utc.utcoffset(None):
        text = text[: -len("+00:00")] + "Z"
    return text


def _time_ago(moment: datetime, now: datetime) -> str:
    seconds = (now - moment).total_seconds()
    minutes = seconds / 60
    hours = minutes / 60
    days = hours / 24
    months = days / 30
    years = months / 12
    if minutes < 1:
        return "now"
    if hours < 1:
        value, unit = int(minutes), "minute"
    elif days < 1:
        value, unit = int(hours), "hour"
    elif months < 1:
        value, unit = int(days), "day"
    elif years < 1:
        value, unit = int(months), "month"
    else:
        value, unit = int(years), "year"
    plural = "s" if value > 1 else ""
    return f"{value} {unit}{plural} ago"


def _date_fields(moment: datetime | None, now: datetime) -> tuple[str, str, str, str]:
    if moment is None:
        return "", "", "", ""
    moment = _aware(moment)
    return (
        moment.strftime("%d %b %Y"),
        _iso8601(moment),
        str(int(moment.timestamp())),
        _time_ago(moment, now),
    )


def release_placeholders(release: Release) -> dict[str, str]:
    """Return the values of every format placeholder for ``release``."""
    now = datetime.now(timezone.utc)
    state = release.state()
    c_date, c_iso, c_unix, c_rel = _date_fields(release.created_at, now)
    p_date, p_iso, p_unix, p_rel = _date_fields(release.published_at, now)
    assets = "\n".join(f"{a.download_url}\t{a.label}" for a in release.assets)
    return {
        "U": release.html_url,
        "uT": release.tarball_url,
        "uZ": release.zipball_url,
        "uA": release.upload_url,
        "S": state,
        "sC": _STATE_COLORS.get(state, ""),
        "t": release.name,
        "T": release.tag_name,
        "b": release.body,
        "as": assets,
        "cD": c_date,
        "cI": c_iso,
        "ct": c_unix,
        "cr": c_rel,
        "pD": p_date,
        "pI": p_iso,
        "pt": p_unix,
        "pr": p_rel,
    }


def _color_spec(spec: str) -> str | None:
    spec = spec.removeprefix("auto,")
    if spec == "reset":
        return "\033[m"
    codes: list[str] = []
    colors_seen = 0
    for word in spec.split():
        if word in _COLOR_NAMES:
            base = 30 if colors_seen == 0 else 40
            codes.append(str(base + _COLOR_NAMES[word]))
            colors_seen += 1
        elif word in _ATTRIBUTES:
            codes.append(str(_ATTRIBUTES[word]))
        else:
            return None
    return f"\033[{';'.join(codes)}m"


def _expand_one(
    rest: str, placeholders: Mapping[str, str], colorize: bool
) -> tuple[str, int] | None:
    """Expand the directive at the start of ``rest``; return text and length."""
    if rest.startswith("n"):
        return "\n", 1
    if rest.startswith("%"):
        return "%", 1
    match = _HEX_RE.match(rest)
    if match:
        return chr(int(match.group(1), 16)), match.end()
    match = _COLOR_SPEC_RE.match(rest)
    if match:
        code = _color_spec(match.group(1))
        if code is None:
            return None
        return (code if colorize else ""), match.end()
    match = _SHORT_COLOR_RE.match(rest)
    if match:
        return (_SHORT_COLORS[match.group(1)] if colorize else ""), match.end()
    for width in (2, 1):
        key = rest[:width]
        if len(key) == width and key in placeholders:
            value = placeholders[key]
            if not colorize and _ESCAPES_ONLY_RE.match(value):
                value = ""
            return value, width
    return None


def expand_format(format: str, placeholders: Mapping[str, str], colorize: bool) -> str:
    """Expand ``%`` placeholders in ``format`` in the manner of ``git log``.

    Besides the given placeholders, ``%n``, ``%%``, ``%xNN`` and the ``%C``
    colour directives are understood. A ``+`` after ``%`` puts a newline
    before a non-empty value, a space does the same with a space, and ``-``
    drops the newlines just before an empty value. Unknown directives are
    left as they are. Colours are only emitted when ``colorize`` is true.
    """
    out: list[str] = []
    pos = 0
    while True:
        pct = format.find("%", pos)
        if pct < 0:
            out.append(format[pos:])
            break
        out.append(format[pos:pct])
        rest = format[pct + 1:]
        modifier = rest[:1] if rest[:1] in ("+", "-", " ") else ""
        expanded = _expand_one(rest[len(modifier):], placeholders, colorize)
        if expanded is None and modifier:
            modifier = ""
            expanded = _expand_one(rest, placeholders, colorize)
        if expanded is None:
            out.append("%")
            pos = pct + 1
            continue
        text, length = expanded
        if modifier == "+" and text:
            text = "\n" + text
        elif modifier == " " and text:
            text = " " + text
        elif modifier == "-" and not text:
            joined = "".join(out).rstrip("\n")
            out = [joined]
        out.append(text)
        pos = pct + 1 + len(modifier) + length
    return "".join(out)


def format_release(release: Release, format: str, colorize: bool) -> str:
    """Render ``release`` with ``format``."""
    return expand_format(format, release_placeholders(release), colorize)