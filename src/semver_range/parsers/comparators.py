"""Comparator token lookup."""

from __future__ import annotations

from ..errors import LexicalError
from ..models.comparison import EQ, GE, GT, LE, LT, NE, Comparator

# Aliases map to the same canonical instance.
COMPARATORS: dict[str, Comparator] = {
    "": EQ,
    "=": EQ,
    "==": EQ,
    "!=": NE,
    "!": NE,
    "<": LT,
    "<=": LE,
    ">": GT,
    ">=": GE,
}


def parse_comparator(token: str) -> Comparator:
    """Return the comparator for ``token``, or raise LexicalError."""
    comparator = COMPARATORS.get(token)
    if comparator is None:
        raise LexicalError(f"unrecognized comparator '{token}'")
    return comparator
