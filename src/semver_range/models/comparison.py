"""Comparators and the atomic comparison predicate."""

from __future__ import annotations

import operator
from collections.abc import Callable
from dataclasses import dataclass

from packaging.version import Version

from ..version import format_version
from .predicate import Predicate


@dataclass(slots=True, frozen=True)
class Comparator:
    """A named binary relation between two versions."""

    symbol: str
    name: str
    func: Callable[[Version, Version], bool]

    def __call__(self, left: Version, right: Version) -> bool:
        return self.func(left, right)

    def __str__(self) -> str:
        return self.symbol


EQ = Comparator(symbol="=", name="equal", func=operator.eq)
NE = Comparator(symbol="!=", name="not-equal", func=operator.ne)
LT = Comparator(symbol="<", name="less-than", func=operator.lt)
LE = Comparator(symbol="<=", name="less-or-equal", func=operator.le)
GT = Comparator(symbol=">", name="greater-than", func=operator.gt)
GE = Comparator(symbol=">=", name="greater-or-equal", func=operator.ge)


@dataclass(slots=True, frozen=True)
class AtomicComparison(Predicate):
    """Compare the tested version against a fixed bound: ``comparator(version, bound)``."""

    comparator: Comparator
    version: Version

    def __call__(self, version: Version) -> bool:
        return self.comparator(version, self.version)

    def __str__(self) -> str:
        if self.comparator == EQ:
            return format_version(self.version)
        return f"{self.comparator.symbol}{format_version(self.version)}"
