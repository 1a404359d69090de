"""
ABOUTME: Exception classes for typed environment variable lookups
ABOUTME: Distinguishes a missing variable from a variable whose text cannot be parsed
"""

from typing import Optional


class EnvLookupError(Exception):
    """Base class for environment lookup errors."""

    def __init__(self, var: str, message: Optional[str] = None):
        self.var = var
        super().__init__(message or f'environment variable "{var}" lookup failed')


class NotFoundError(EnvLookupError):
    """The environment variable is not set and no default was supplied."""

    def __init__(self, var: str):
        super().__init__(var, f'could not find environment variable "{var}"')


class InvalidFormatError(EnvLookupError):
    """The environment variable is set but its text could not be parsed."""

    def __init__(self, var: str, cause: Exception):
        self.cause = cause
        super().__init__(var, f'could not parse environment variable "{var}": {cause}')
        self.__cause__ = cause
