"""Partial and wildcard version handling.

A version token may omit trailing components or replace them with ``x``, ``X``
or ``*``; ``1``, ``1.x`` and ``1.x.x`` all mean "any 1.y.z". Such tokens are
resolved into explicit bounds before anything is compiled:

- ``lower``: the specified components, missing ones as 0 (``1.2.x`` -> ``1.2.0``)
- ``upper``: the lowest specified component incremented (``1.2.x`` -> ``1.3.0``)
"""

from __future__ import annotations

from dataclasses import dataclass

from packaging.version import Version

from ..errors import InvalidVersionError
from ..models.comparison import EQ, GE, GT, LT, NE, AtomicComparison, Comparator
from ..models.predicate import ALWAYS, NEVER, Predicate, all_of, any_of
from ..version import next_major, next_minor, parse_version
from .comparators import parse_comparator
from .terms import WILDCARDS


@dataclass(slots=True, frozen=True)
class PartialVersion:
    """Version token whose missing components are ``None``."""

    major: int | None
    minor: int | None
    patch: int | None
    suffix: str = ""

    @property
    def is_any(self) -> bool:
        return self.major is None

    @property
    def is_exact(self) -> bool:
        return self.patch is not None

    def exact(self) -> Version:
        if not self.is_exact:
            raise InvalidVersionError(f"'{self}' is not a fully specified version")
        return parse_version(f"{self.major}.{self.minor}.{self.patch}{self.suffix}")

    def lower(self) -> Version:
        return parse_version(f"{self.major or 0}.{self.minor or 0}.{self.patch or 0}")

    def upper(self) -> Version:
        if self.minor is None:
            return next_major(self.lower())
        return next_minor(self.lower())

    def __str__(self) -> str:
        parts = [str(part) for part in (self.major, self.minor, self.patch) if part is not None]
        if len(parts) < 3:
            parts.append("x")
        return ".".join(parts) + self.suffix


def strip_v_prefix(token: str) -> str:
    if token[:1] in ("v", "V"):
        return token[1:]
    return token


def _split_suffix(token: str) -> tuple[str, str]:
    cut = len(token)
    for marker in ("-", "+"):
        position = token.find(marker)
        if position != -1:
            cut = min(cut, position)
    return token[:cut], token[cut:]


def parse_partial(token: str) -> PartialVersion:
    """Parse a possibly partial or wildcarded version token.

    Raises:
        InvalidVersionError: If the token is not a version, has more than three
            components, has a number after a wildcard, or carries a
            prerelease/build suffix without being fully specified.
    """
    text = strip_v_prefix(token)
    core, suffix = _split_suffix(text)
    parts = core.split(".")
    if not core or len(parts) > 3:
        raise InvalidVersionError(f"invalid version '{token}'")

    components: list[int | None] = []
    for part in parts:
        if part in WILDCARDS:
            components.append(None)
        elif part.isascii() and part.isdigit() and (part == "0" or not part.startswith("0")):
            if components and components[-1] is None:
                raise InvalidVersionError(f"invalid version '{token}': number after wildcard")
            components.append(int(part))
        else:
            raise InvalidVersionError(f"invalid version '{token}'")
    components.extend([None] * (3 - len(components)))

    partial = PartialVersion(*components, suffix=suffix)
    if suffix and not partial.is_exact:
        raise InvalidVersionError(f"invalid version '{token}': suffix on a partial version")
    if partial.is_exact:
        # Leading zeros and suffix syntax are the collaborator's call.
        parse_version(core + suffix)
    return partial


def _expand_wildcard(comparator: Comparator, partial: PartialVersion) -> Predicate:
    lower, upper = partial.lower(), partial.upper()
    if comparator == EQ:
        return all_of(AtomicComparison(GE, lower), AtomicComparison(LT, upper))
    if comparator == NE:
        return any_of(AtomicComparison(LT, lower), AtomicComparison(GE, upper))
    if comparator == GT:
        return AtomicComparison(GE, upper)
    if comparator == GE:
        return AtomicComparison(GE, lower)
    if comparator == LT:
        return AtomicComparison(LT, lower)
    # LE
    return AtomicComparison(LT, upper)


def expand_comparison(operator: str, token: str) -> Predicate:
    """Resolve an operator and version token into a predicate.

    ``>1.x`` becomes ``>=2.0.0``, ``<=1.2.x`` becomes ``<1.3.0``, ``1.x``
    becomes ``>=1.0.0 <2.0.0`` and ``!=1.x`` its complement. A bare wildcard
    places no constraint, except ``!=x`` which matches nothing.
    """
    comparator = parse_comparator(operator)
    partial = parse_partial(token)
    if partial.is_any:
        return NEVER if comparator == NE else ALWAYS
    if partial.is_exact:
        return AtomicComparison(comparator, partial.exact())
    return _expand_wildcard(comparator, partial)


def build_atomic_comparison(operator: str, token: str) -> AtomicComparison:
    """Return the single comparison for an operator and a fully specified version."""
    comparator = parse_comparator(operator)
    partial = parse_partial(token)
    return AtomicComparison(comparator, partial.exact())
