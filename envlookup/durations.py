"""
ABOUTME: Parser for duration literals such as "27m32s", "1h30m" or "-1.5h"
ABOUTME: Converts a signed sequence of number+unit components into a timedelta
"""

import re
from datetime import timedelta

# Nanoseconds per unit suffix.
UNITS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # greek small letter mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 60 * 60 * 1_000_000_000,
}

MAX_NANOSECONDS = (1 << 63) - 1

_COMPONENT = re.compile(r"(?P<whole>[0-9]*)(?:\.(?P<frac>[0-9]*))?(?P<unit>[^0-9.]*)")


def parse_duration_ns(text: str) -> int:
    """
    Parse a duration literal into a signed number of nanoseconds.

    A literal is an optional sign followed by one or more components, each a
    decimal number with an optional fraction and a unit suffix. The bare
    literal "0" is accepted without a unit. The magnitude must fit in a signed
    64-bit nanosecond count.

    Raises:
        ValueError: If the literal is empty, malformed, uses an unknown unit
            or is out of range.
    """
    original = text
    negative = False
    if text[:1] in ("-", "+"):
        negative = text[0] == "-"
        text = text[1:]

    if text == "0":
        return 0
    if not text:
        raise ValueError(f'invalid duration "{original}"')

    limit = MAX_NANOSECONDS + (1 if negative else 0)
    total = 0
    pos = 0
    while pos < len(text):
        match = _COMPONENT.match(text, pos)
        whole, frac, unit = match.group("whole"), match.group("frac"), match.group("unit")
        if not whole and not frac:
            raise ValueError(f'invalid duration "{original}"')
        if not unit:
            raise ValueError(f'missing unit in duration "{original}"')
        if unit not in UNITS:
            raise ValueError(f'unknown unit "{unit}" in duration "{original}"')

        scale = UNITS[unit]
        nanos = int(whole or "0") * scale
        if frac:
            nanos += int(frac) * scale // 10 ** len(frac)
        total += nanos
        if total > limit:
            raise ValueError(f'duration "{original}" out of range')
        pos = match.end()

    return -total if negative else total


def parse_duration(text: str) -> timedelta:
    """Parse a duration literal into a timedelta, truncated to microseconds."""
    nanos = parse_duration_ns(text)
    micros = abs(nanos) // 1_000
    return timedelta(microseconds=-micros if nanos < 0 else micros)
