"""Exceptions raised by the censoring engine."""

from __future__ import annotations


class CensoringError(Exception):
    """Base class for all censoring errors."""


class UnknownFilter(CensoringError, LookupError):
    """Raised when enabling or disabling a filter that isn't registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid filter supplied: {name!r}")
        self.name = name


class InvalidArgument(CensoringError, ValueError):
    """Raised when a value of the wrong type or shape is supplied."""


class InvalidPatternType(CensoringError, TypeError):
    """Raised at scan time when a detector's matcher can't be applied."""
