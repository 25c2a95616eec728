"""Environment helpers: ``.env`` loading and duration settings."""

from __future__ import annotations

import os
import re
from datetime import timedelta
from decimal import ROUND_HALF_EVEN, Decimal
from pathlib import Path

_EXPANSION = re.compile(
    r"\$(?:\{([^}]*)\}|([*#$@!?\-0-9])|([A-Za-z0-9_]+)|\{)"
)

_NANOS_PER_UNIT = {
    "ns": Decimal(1),
    "us": Decimal(1_000),
    "µs": Decimal(1_000),
    "μs": Decimal(1_000),
    "ms": Decimal(1_000_000),
    "s": Decimal(1_000_000_000),
    "m": Decimal(60_000_000_000),
    "h": Decimal(3_600_000_000_000),
}

_COMPONENT = re.compile(r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def _expand_variables(value: str) -> str:
    """Replace ``$NAME`` and ``${NAME}`` with values from the environment."""

    def substitute(match: re.Match) -> str:
        name = match.group(1) or match.group(2) or match.group(3)
        if not name:
            return ""
        return os.environ.get(name, "")

    return _EXPANSION.sub(substitute, value)


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def load_dotenv(path) -> None:
    """Load ``KEY=value`` pairs from *path* into the environment.

    A missing file is ignored. Variables already set are left untouched.
    Raises ValueError for a malformed line.
    """
    try:
        handle = Path(path).open(encoding="utf-8")
    except FileNotFoundError:
        return

    with handle:
        for line_no, raw_line in enumerate(handle, start=1):
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if line.startswith("export "):
                line = line[len("export "):].strip()

            key, sep, value = line.partition("=")
            if not sep:
                raise ValueError(f"invalid .env line {line_no}: missing '='")

            key = key.strip()
            if not key:
                raise ValueError(f"invalid .env line {line_no}: empty key")

            value = _expand_variables(_unquote(value.strip()))
            os.environ.setdefault(key, value)


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as ``30s``, ``1h30m`` or ``-1.5ms``."""
    body = text
    negative = False
    if body.startswith(("-", "+")):
        negative = body[0] == "-"
        body = body[1:]

    if body == "0":
        return timedelta(0)
    if not body:
        raise ValueError(f"invalid duration {text!r}")

    total = Decimal(0)
    pos = 0
    while pos < len(body):
        match = _COMPONENT.match(body, pos)
        if match is None:
            raise ValueError(f"invalid duration {text!r}")
        number, unit = match.groups()
        total += Decimal(number) * _NANOS_PER_UNIT[unit]
        pos = match.end()

    micros = int((total / 1000).to_integral_value(rounding=ROUND_HALF_EVEN))
    result = timedelta(microseconds=micros)
    return -result if negative else result


def env_duration(key: str, fallback: timedelta) -> timedelta:
    """Read a positive duration from environment variable *key*.

    Returns *fallback* when the variable is unset or blank.
    """
    raw = os.environ.get(key, "").strip()
    if not raw:
        return fallback

    try:
        duration = parse_duration(raw)
    except ValueError as err:
        raise ValueError(
            f"{key} must be a valid duration (for example: 30s or 2m): {err}"
        ) from err

    if duration <= timedelta(0):
        raise ValueError(f"{key} must be greater than 0")
    return duration