"""Split a single term into its operator and version tokens."""

from __future__ import annotations

from ..errors import MalformedTermError

COMPARATOR_CHARS = frozenset("<>=!")
WILDCARDS = frozenset({"x", "X", "*"})


def _looks_like_version(token: str) -> bool:
    first = token[0]
    return first.isdigit() or first in "vV" or first in WILDCARDS


def split_term(term: str) -> tuple[str, str]:
    """Return ``(operator, version)`` for a term such as ``>=v1.x``.

    Splitting is purely lexical: the operator is the leading run of
    comparator characters and is validated later by ``parse_comparator``.
    A term without an operator yields ``""``, which means equal.

    Raises:
        MalformedTermError: If no version follows the operator.
    """
    index = 0
    while index < len(term) and term[index] in COMPARATOR_CHARS:
        index += 1
    operator, version = term[:index], term[index:]
    if not version:
        raise MalformedTermError(f"term '{term}' has no version")
    if not _looks_like_version(version):
        raise MalformedTermError(f"could not get version from term '{term}'")
    return operator, version
