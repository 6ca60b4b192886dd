"""Errors raised while parsing range expressions."""

from __future__ import annotations


class RangeError(ValueError):
    """Base error for any range expression that cannot be parsed."""


class LexicalError(RangeError):
    """Raised when a comparator token is not recognised."""


class MalformedTermError(RangeError):
    """Raised when a term, clause or range has no usable content."""


class InvalidVersionError(RangeError):
    """Raised when a version token cannot be resolved to a version."""


class RangeParseFailure(RuntimeError):
    """Raised by ``must_parse_range`` for expressions that were expected to be valid."""
