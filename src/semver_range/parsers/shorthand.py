"""Caret, tilde and hyphen shorthand expansion.

Supported shorthands:
- tilde ranges ~x.y.z → >=x.y.z <x.y+1.0
- caret ranges ^x.y.z → >=x.y.z below the next change of the leftmost nonzero
  component (^1.2.3 → <2.0.0, ^0.2.3 → <0.3.0, ^0.0.3 → <0.0.4)
- hyphen ranges a - b → >=a <=b, with a partial b rounded up (1 - 3 → <4.0.0)

Partial tilde/caret forms fall back to wildcard bounds: ~1.2 is 1.2.x, ^1.x is
1.x, and ^1.2.x is >=1.2.0 <2.0.0.
"""

from __future__ import annotations

from packaging.version import Version

from ..errors import InvalidVersionError, MalformedTermError
from ..models.comparison import GE, LT, AtomicComparison
from ..models.predicate import Predicate, all_of
from ..version import next_major, next_minor, next_patch
from .terms import split_term
from .wildcards import PartialVersion, expand_comparison, parse_partial


def _bounded(lower: Version, upper: Version) -> Predicate:
    return all_of(AtomicComparison(GE, lower), AtomicComparison(LT, upper))


def _parse_shorthand_operand(term: str) -> PartialVersion:
    operand = term[1:]
    if not operand:
        raise MalformedTermError(f"term '{term}' has no version")
    partial = parse_partial(operand)
    if partial.is_any:
        raise InvalidVersionError(f"'{term}' has no version to anchor the range")
    return partial


def _caret_upper(partial: PartialVersion, lower: Version) -> Version:
    if partial.minor is None or lower.major > 0:
        return next_major(lower)
    if partial.patch is None or lower.minor > 0:
        return next_minor(lower)
    return next_patch(lower)


def expand_tilde(term: str) -> Predicate:
    """Expand ``~1.2.3`` (patch-level changes only)."""
    partial = _parse_shorthand_operand(term)
    if not partial.is_exact:
        return _bounded(partial.lower(), partial.upper())
    base = partial.exact()
    return _bounded(base, next_minor(base))


def expand_caret(term: str) -> Predicate:
    """Expand ``^1.2.3`` (changes that keep the leftmost nonzero component)."""
    partial = _parse_shorthand_operand(term)
    lower = partial.exact() if partial.is_exact else partial.lower()
    return _bounded(lower, _caret_upper(partial, lower))


def _hyphen_operand(token: str) -> str:
    operator, version = split_term(token)
    if operator:
        raise MalformedTermError(f"hyphen range bound '{token}' must not have a comparator")
    return version


def expand_hyphen(lower: str, upper: str) -> Predicate:
    """Expand ``lower - upper`` into an inclusive range."""
    return all_of(
        expand_comparison(">=", _hyphen_operand(lower)),
        expand_comparison("<=", _hyphen_operand(upper)),
    )


def expand_term(term: str) -> Predicate:
    """Expand a single whitespace-free term of a clause."""
    if term.startswith("^"):
        return expand_caret(term)
    if term.startswith("~"):
        return expand_tilde(term)
    operator, version = split_term(term)
    return expand_comparison(operator, version)
