"""Duration literals: ``"10s"``, ``"5m"``, ``"1h30m"``, ``"1.5h"``.

Grammar: an optional sign followed by one or more ``<number><unit>``
pairs. ``<number>`` is an integer or decimal, ``<unit>`` one of
``ns us µs μs ms s m h``. The bare literal ``"0"`` is accepted by the
grammar but, like every non-positive result, rejected by
:func:`parse_duration`.
"""
from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal

from tickdown.types import DurationError

# Nanoseconds per unit.
_UNITS: dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # U+00B5 micro sign
    "μs": 1_000,  # U+03BC greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 60 * 60 * 1_000_000_000,
}

# Longest accepted duration, about 292 years.
MAX_NANOSECONDS = 2**63 - 1

_PAIR_RE = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")


def _nanoseconds(text: str) -> Decimal:
    """Sum the pairs of *text* into signed nanoseconds."""
    s = text
    negative = False
    if s[:1] in ("-", "+"):
        negative = s[0] == "-"
        s = s[1:]
    if s == "0":
        return Decimal(0)
    if not s:
        raise DurationError(text, f"invalid duration {text!r}")

    total = Decimal(0)
    pos = 0
    while pos < len(s):
        m = _PAIR_RE.match(s, pos)
        whole, frac, unit = m.group(1), m.group(2), m.group(3)
        if not whole and not frac:
            raise DurationError(text, f"invalid duration {text!r}")
        if not unit:
            raise DurationError(text, f"missing unit in duration {text!r}")
        scale = _UNITS.get(unit)
        if scale is None:
            raise DurationError(text, f"unknown unit {unit!r} in duration {text!r}")
        total += Decimal(f"{whole or '0'}.{frac or '0'}") * scale
        pos = m.end()
    return -total if negative else total


def parse_duration(text: str) -> timedelta:
    """Parse *text* into a positive :class:`~datetime.timedelta`.

    Sub-microsecond results round up to one microsecond. Raises
    :class:`DurationError` for malformed, empty, zero or negative input
    and for anything longer than :data:`MAX_NANOSECONDS`.
    """
    stripped = text.strip()
    if not stripped:
        raise DurationError(text, "empty duration")
    nanos = _nanoseconds(stripped)
    if nanos <= 0:
        raise DurationError(text, f"duration must be positive, got {text!r}")
    if nanos > MAX_NANOSECONDS:
        raise DurationError(text, f"duration out of range, got {text!r}")
    micros = max(int((nanos / 1000).to_integral_value()), 1)
    return timedelta(microseconds=micros)


def format_duration(value: timedelta) -> str:
    """Render *value* rounded to whole seconds, e.g. ``"1h0m5s"``."""
    micros = value // timedelta(microseconds=1)
    sign = "-" if micros < 0 else ""
    # Round half away from zero.
    seconds = (abs(micros) + 500_000) // 1_000_000
    if seconds == 0:
        return "0s"
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{sign}{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{sign}{minutes}m{secs}s"
    return f"{sign}{secs}s"
