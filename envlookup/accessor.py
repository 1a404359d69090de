"""
ABOUTME: Typed accessor for environment variables with optional defaults
ABOUTME: Returns (value, error) results distinguishing missing variables from malformed ones
"""

import logging
import os
from typing import Any, Mapping, NamedTuple, Optional

from .exceptions import EnvLookupError, InvalidFormatError, NotFoundError
from .parsers import get_type_spec

# Sentinel for "no default supplied"; None is a legal default.
_MISSING = object()


class LookupResult(NamedTuple):
    """Outcome of a typed lookup. Unpacks as ``value, error``."""

    value: Any
    error: Optional[EnvLookupError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class TypedEnvAccessor:
    """Typed, read-only lookups over an environment namespace."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize the accessor with the namespace to read from.

        Parameters:
            environ (Mapping[str, str], optional): Namespace to read variables from.
                Defaults to the live process environment, read at call time.
        """
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def lookup(self, name: str, type_name: str, default: Any = _MISSING) -> LookupResult:
        """
        Look up a variable and parse it as the named type.

        If the variable is absent, the default is returned without error when one
        was supplied, otherwise the type's zero value is returned with NotFoundError.
        If the variable is present its text is parsed; a parse failure returns the
        zero value with InvalidFormatError even when a default was supplied.

        Parameters:
            name (str): Environment variable name.
            type_name (str): Registered type name, e.g. "int" or "duration".
            default (optional): Value to return when the variable is absent.

        Returns:
            LookupResult: The (value, error) pair.

        Raises:
            ValueError: If type_name is not a registered type.
        """
        spec = get_type_spec(type_name)
        text = self.environ.get(name)

        if text is None:
            if default is not _MISSING:
                logging.debug(f"Environment variable '{name}' not set, using default")
                return LookupResult(default)
            logging.debug(f"Environment variable '{name}' not set")
            return LookupResult(spec.zero(), NotFoundError(name))

        try:
            value = spec.parse(text)
        except ValueError as e:
            logging.debug(f"Invalid {spec.name} value for '{name}': {e}")
            return LookupResult(spec.zero(), InvalidFormatError(name, e))
        return LookupResult(value)

    def lookup_string(self, name: str, default: Any = _MISSING) -> LookupResult:
        """Raw text of the variable, which may be empty."""
        return self.lookup(name, "string", default)

    def lookup_string_list(self, name: str, default: Any = _MISSING) -> LookupResult:
        """Comma separated list of strings, untrimmed."""
        return self.lookup(name, "string-list", default)

    def lookup_int(self, name: str, default: Any = _MISSING) -> LookupResult:
        return self.lookup(name, "int", default)

    def lookup_int64(self, name: str, default: Any = _MISSING) -> LookupResult:
        return self.lookup(name, "int64", default)

    def lookup_uint64(self, name: str, default: Any = _MISSING) -> LookupResult:
        """Unsigned 64-bit integer; accepts 0x, 0o, 0b and leading-zero octal."""
        return self.lookup(name, "uint64", default)

    def lookup_bool(self, name: str, default: Any = _MISSING) -> LookupResult:
        """Case-insensitive "true"/"1" or "false"/"0"."""
        return self.lookup(name, "bool", default)

    def lookup_float(self, name: str, default: Any = _MISSING) -> LookupResult:
        return self.lookup(name, "float", default)

    def lookup_duration(self, name: str, default: Any = _MISSING) -> LookupResult:
        """Duration literal such as "27m32s", returned as a timedelta."""
        return self.lookup(name, "duration", default)


_process_env = TypedEnvAccessor()


def lookup_string(name: str, default: Any = _MISSING) -> LookupResult:
    return _process_env.lookup_string(name, default)


def lookup_string_list(name: str, default: Any = _MISSING) -> LookupResult:
    return _process_env.lookup_string_list(name, default)


def lookup_int(name: str, default: Any = _MISSING) -> LookupResult:
    return _process_env.lookup_int(name, default)


def lookup_int64(name: str, default: Any = _MISSING) -> LookupResult:
    return _process_env.lookup_int64(name, default)


def lookup_uint64(name: str, default: Any = _MISSING) -> LookupResult:
    return _process_env.lookup_uint64(name, default)


def lookup_bool(name: str, default: Any = _MISSING) -> LookupResult:
    return _process_env.lookup_bool(name, default)


def lookup_float(name: str, default: Any = _MISSING) -> LookupResult:
    return _process_env.lookup_float(name, default)


def lookup_duration(name: str, default: Any = _MISSING) -> LookupResult:
    return _process_env.lookup_duration(name, default)
