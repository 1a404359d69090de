"""
ABOUTME: Fatal wrappers for lookups of mandatory environment variables
ABOUTME: Return the looked-up value or raise the lookup error, e.g. must_int(lookup_int("WORKERS"))
"""

import logging
from datetime import timedelta
from typing import Any, Callable, Dict, List, Optional, Tuple

from .exceptions import EnvLookupError


def must(result: Tuple[Any, Optional[EnvLookupError]]) -> Any:
    """
    Return the value of a lookup result, raising its error if it has one.

    Intended only for configuration the program cannot start without; the
    raised error is not meant to be recovered from.

    Raises:
        NotFoundError: If the variable was not set and had no default.
        InvalidFormatError: If the variable could not be parsed.
    """
    value, error = result
    if error is not None:
        logging.error(f"Mandatory environment variable unavailable: {error}")
        raise error
    return value


def must_string(result) -> str:
    return must(result)


def must_string_list(result) -> List[str]:
    return must(result)


def must_int(result) -> int:
    return must(result)


def must_int64(result) -> int:
    return must(result)


def must_uint64(result) -> int:
    return must(result)


def must_bool(result) -> bool:
    return must(result)


def must_float(result) -> float:
    return must(result)


def must_duration(result) -> timedelta:
    return must(result)


MUST_WRAPPERS: Dict[str, Callable[[Any], Any]] = {
    "string": must_string,
    "string-list": must_string_list,
    "int": must_int,
    "int64": must_int64,
    "uint64": must_uint64,
    "bool": must_bool,
    "float": must_float,
    "duration": must_duration,
}
