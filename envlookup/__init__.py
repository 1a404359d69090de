"""
ABOUTME: Typed environment variable lookups with defaults and a two-kind error taxonomy
ABOUTME: Provides typed accessors, fatal must-wrappers, value parsers and a small CLI
"""

from .accessor import (
    LookupResult,
    TypedEnvAccessor,
    lookup_bool,
    lookup_duration,
    lookup_float,
    lookup_int,
    lookup_int64,
    lookup_string,
    lookup_string_list,
    lookup_uint64,
)
from .durations import parse_duration
from .exceptions import EnvLookupError, InvalidFormatError, NotFoundError
from .must import (
    must,
    must_bool,
    must_duration,
    must_float,
    must_int,
    must_int64,
    must_string,
    must_string_list,
    must_uint64,
)
from .parsers import TYPE_REGISTRY

__version__ = "0.1.0"
__all__ = [
    "TypedEnvAccessor",
    "LookupResult",
    "lookup_string",
    "lookup_string_list",
    "lookup_int",
    "lookup_int64",
    "lookup_uint64",
    "lookup_bool",
    "lookup_float",
    "lookup_duration",
    "must",
    "must_string",
    "must_string_list",
    "must_int",
    "must_int64",
    "must_uint64",
    "must_bool",
    "must_float",
    "must_duration",
    "EnvLookupError",
    "NotFoundError",
    "InvalidFormatError",
    "parse_duration",
    "TYPE_REGISTRY",
]
