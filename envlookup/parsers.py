"""
ABOUTME: Text parsers for each supported environment variable type
ABOUTME: Registers every type with its parser and zero value for the accessor and CLI
"""

import math
import re
from datetime import timedelta
from typing import Any, Callable, Dict, List, NamedTuple

from .durations import parse_duration

SEPARATOR = ","

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1

_SIGNED_DECIMAL = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_LITERAL = re.compile(r"[0-9A-Za-z_]+")
_BASE_PREFIXES = ("0x", "0o", "0b")
_HEX_FLOAT = re.compile(
    r"[+-]?0[xX]"
    r"(?=_?[0-9a-fA-F]|\.[0-9a-fA-F])"
    r"(?:_?[0-9a-fA-F])*"
    r"(?:\.(?:[0-9a-fA-F](?:_?[0-9a-fA-F])*)?)?"
    r"[pP][+-]?[0-9](?:_?[0-9])*"
)
_INFINITIES = {"inf", "+inf", "-inf", "infinity", "+infinity", "-infinity"}


def parse_string(text: str) -> str:
    return text


def parse_string_list(text: str) -> List[str]:
    """Split on a literal comma. No trimming; empty text yields [""]."""
    return text.split(SEPARATOR)


def parse_int64(text: str) -> int:
    """Parse a signed decimal integer that fits in 64 bits."""
    if not _SIGNED_DECIMAL.fullmatch(text):
        raise ValueError(f'"{text}" is not parseable as int value')
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f'"{text}" is out of range for a 64-bit int')
    return value


parse_int = parse_int64


def parse_uint64(text: str) -> int:
    """
    Parse an unsigned integer literal that fits in 64 bits.

    Accepts decimal, 0x/0o/0b prefixed literals and a bare leading 0 for
    octal. Signs and whitespace are rejected; underscores may only separate
    digits.
    """
    if not _UNSIGNED_LITERAL.fullmatch(text):
        raise ValueError(f'"{text}" is not parseable as uint value')

    literal = text
    if text[:2].lower() not in _BASE_PREFIXES and len(text) > 1 and text[0] == "0":
        literal = "0o" + text[1:]
    try:
        value = int(literal, 0)
    except ValueError:
        raise ValueError(f'"{text}" is not parseable as uint value') from None
    if value > UINT64_MAX:
        raise ValueError(f'"{text}" is out of range for a 64-bit uint')
    return value


def parse_bool(text: str) -> bool:
    lowered = text.lower()
    if lowered in ("true", "1"):
        return True
    if lowered in ("false", "0"):
        return False
    raise ValueError(f'"{text}" is not parseable as bool value')


def parse_float(text: str) -> float:
    """
    Parse a float literal.

    Accepts decimal and scientific notation, inf/infinity/nan, and hex
    literals with a binary exponent such as "0x1p-2". Underscores may only
    separate digits. Non-ASCII text, surrounding whitespace and finite
    literals that overflow are rejected.
    """
    if not text.isascii() or text != text.strip():
        raise ValueError(f'"{text}" is not parseable as float value')
    try:
        if text.lstrip("+-")[:2].lower() == "0x":
            if not _HEX_FLOAT.fullmatch(text):
                raise ValueError(text)
            value = float.fromhex(text.replace("_", ""))
        else:
            value = float(text)
    except OverflowError:
        raise ValueError(f'"{text}" is out of range for a float') from None
    except ValueError:
        raise ValueError(f'"{text}" is not parseable as float value') from None
    if math.isinf(value) and text.lower() not in _INFINITIES:
        raise ValueError(f'"{text}" is out of range for a float')
    return value


class TypeSpec(NamedTuple):
    """A supported lookup type: its parser and a factory for its zero value."""

    name: str
    parse: Callable[[str], Any]
    zero: Callable[[], Any]


TYPE_REGISTRY: Dict[str, TypeSpec] = {
    spec.name: spec
    for spec in (
        TypeSpec("string", parse_string, str),
        TypeSpec("string-list", parse_string_list, list),
        TypeSpec("int", parse_int, int),
        TypeSpec("int64", parse_int64, int),
        TypeSpec("uint64", parse_uint64, int),
        TypeSpec("bool", parse_bool, bool),
        TypeSpec("float", parse_float, float),
        TypeSpec("duration", parse_duration, timedelta),
    )
}


def get_type_spec(type_name: str) -> TypeSpec:
    """
    Return the registered TypeSpec for a type name.

    Raises:
        ValueError: If the type name is not registered.
    """
    spec = TYPE_REGISTRY.get(type_name)
    if spec is None:
        raise ValueError(
            f"Type '{type_name}' not supported. Available types: {list(TYPE_REGISTRY)}"
        )
    return spec
