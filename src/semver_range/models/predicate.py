"""Composable version predicates.

A compiled range is a tree of immutable predicates: ``AllOf`` for the terms of
a clause, ``AnyOf`` for the clauses of a range, ``AtomicComparison`` at the
leaves and ``Constant`` for wildcards that match everything or nothing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

from packaging.version import Version


class Predicate(ABC):
    """A pure test of a version, combinable with ``and_``/``or_`` or ``&``/``|``."""

    __slots__ = ()

    @abstractmethod
    def __call__(self, version: Version) -> bool:
        raise NotImplementedError

    def and_(self, other: Predicate | Callable[[Version], bool]) -> Predicate:
        """Return a predicate accepting versions accepted by both."""
        return all_of(self, as_predicate(other))

    def or_(self, other: Predicate | Callable[[Version], bool]) -> Predicate:
        """Return a predicate accepting versions accepted by either."""
        return any_of(self, as_predicate(other))

    def __and__(self, other: Predicate | Callable[[Version], bool]) -> Predicate:
        return self.and_(other)

    def __or__(self, other: Predicate | Callable[[Version], bool]) -> Predicate:
        return self.or_(other)


@dataclass(slots=True, frozen=True)
class Constant(Predicate):
    """Predicate with a fixed answer, used for bare wildcards."""

    value: bool

    def __call__(self, version: Version) -> bool:
        return self.value

    def __str__(self) -> str:
        return "*" if self.value else "!=*"


ALWAYS = Constant(True)
NEVER = Constant(False)


@dataclass(slots=True, frozen=True)
class FunctionPredicate(Predicate):
    """Adapter for a plain ``Callable[[Version], bool]``."""

    func: Callable[[Version], bool]

    def __call__(self, version: Version) -> bool:
        return bool(self.func(version))

    def __str__(self) -> str:
        return getattr(self.func, "__name__", repr(self.func))


@dataclass(slots=True, frozen=True)
class AllOf(Predicate):
    """Conjunction; evaluation stops at the first rejecting member."""

    members: tuple[Predicate, ...]

    def __call__(self, version: Version) -> bool:
        return all(member(version) for member in self.members)

    def __str__(self) -> str:
        parts = []
        for member in self.members:
            text = str(member)
            if isinstance(member, AnyOf):
                text = f"({text})"
            parts.append(text)
        return " ".join(parts)


@dataclass(slots=True, frozen=True)
class AnyOf(Predicate):
    """Disjunction; evaluation stops at the first accepting member."""

    members: tuple[Predicate, ...]

    def __call__(self, version: Version) -> bool:
        return any(member(version) for member in self.members)

    def __str__(self) -> str:
        return " || ".join(str(member) for member in self.members)


def as_predicate(obj: Predicate | Callable[[Version], bool]) -> Predicate:
    """Return ``obj`` unchanged if it is a Predicate, otherwise wrap the callable."""
    if isinstance(obj, Predicate):
        return obj
    if not callable(obj):
        raise TypeError(f"expected a predicate or callable, got {type(obj).__name__}")
    return FunctionPredicate(obj)


def all_of(*predicates: Predicate) -> Predicate:
    """Conjoin predicates, flattening nested ``AllOf`` and unwrapping a single member."""
    if not predicates:
        raise ValueError("all_of() requires at least one predicate")
    members: list[Predicate] = []
    for predicate in predicates:
        if isinstance(predicate, AllOf):
            members.extend(predicate.members)
        else:
            members.append(predicate)
    if len(members) == 1:
        return members[0]
    return AllOf(tuple(members))


def any_of(*predicates: Predicate) -> Predicate:
    """Disjoin predicates, flattening nested ``AnyOf`` and unwrapping a single member."""
    if not predicates:
        raise ValueError("any_of() requires at least one predicate")
    members: list[Predicate] = []
    for predicate in predicates:
        if isinstance(predicate, AnyOf):
            members.extend(predicate.members)
        else:
            members.append(predicate)
    if len(members) == 1:
        return members[0]
    return AnyOf(tuple(members))
