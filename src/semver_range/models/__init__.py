"""Data models for compiled ranges."""

from __future__ import annotations

from .comparison import EQ, GE, GT, LE, LT, NE, AtomicComparison, Comparator
from .predicate import (
    ALWAYS,
    NEVER,
    AllOf,
    AnyOf,
    Constant,
    FunctionPredicate,
    Predicate,
    all_of,
    any_of,
    as_predicate,
)

__all__ = [
    "ALWAYS",
    "AllOf",
    "AnyOf",
    "AtomicComparison",
    "Comparator",
    "Constant",
    "EQ",
    "FunctionPredicate",
    "GE",
    "GT",
    "LE",
    "LT",
    "NE",
    "NEVER",
    "Predicate",
    "all_of",
    "any_of",
    "as_predicate",
]
