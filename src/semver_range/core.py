"""Core range entrypoints.

``parse_range`` turns an expression such as ``>=1.2.3 <2.0.0 || ^3.1.0`` into
an immutable predicate:

1. split on ``||`` into clauses (OR)
2. split each clause on whitespace into terms (AND), grouping ``a - b``
   hyphen ranges
3. expand each term (caret, tilde, wildcard or plain comparison)
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterable

from packaging.version import Version

from .config import Settings, load_settings
from .errors import InvalidVersionError, MalformedTermError, RangeError, RangeParseFailure
from .models.predicate import Predicate, all_of, any_of
from .parsers.shorthand import expand_hyphen, expand_term
from .version import parse_version

log = logging.getLogger(__name__)

OR_SEPARATOR = "||"
HYPHEN = "-"


def _parse_clause(clause: str) -> Predicate:
    tokens = clause.split()
    if not tokens:
        raise MalformedTermError("empty clause")

    terms: list[Predicate] = []
    index = 0
    while index < len(tokens):
        if index + 1 < len(tokens) and tokens[index + 1] == HYPHEN:
            if index + 2 >= len(tokens):
                raise MalformedTermError(f"hyphen range '{tokens[index]} -' has no upper bound")
            terms.append(expand_hyphen(tokens[index], tokens[index + 2]))
            index += 3
            continue
        terms.append(expand_term(tokens[index]))
        index += 1

    return all_of(*terms)


def parse_range(expression: str) -> Predicate:
    """Parse a range expression into a predicate.

    Impossible ranges such as ``>4 <3`` are accepted and match nothing.

    Raises:
        RangeError: If the expression, any clause or any term is invalid.
    """
    try:
        if not expression.strip():
            raise MalformedTermError("empty range")
        clauses = [_parse_clause(clause) for clause in expression.split(OR_SEPARATOR)]
    except RangeError as exc:
        log.debug("Rejected range %r: %s", expression, exc)
        raise

    predicate = any_of(*clauses)
    log.debug("Compiled range %r as %s", expression, predicate)
    return predicate


def must_parse_range(expression: str) -> Predicate:
    """Like ``parse_range``, for expressions known to be valid.

    Raises:
        RangeParseFailure: If the expression cannot be parsed. This is not a
            RangeError and is not meant to be handled.
    """
    try:
        return parse_range(expression)
    except RangeError as exc:
        raise RangeParseFailure(f"invalid range '{expression}': {exc}") from exc


# Only the LRU for the most recently requested size is kept.
@functools.lru_cache(maxsize=1)
def _cached_parser(maxsize: int) -> Callable[[str], Predicate]:
    return functools.lru_cache(maxsize=maxsize)(parse_range)


def parse_range_cached(expression: str, settings: Settings | None = None) -> Predicate:
    """Memoised ``parse_range``; failures are not cached.

    Settings are read from the environment when not given.

    Raises:
        RangeError: If the expression is invalid.
        ConfigError: If settings are read from an invalid environment.
    """
    if settings is None:
        settings = load_settings()
    if settings.cache_size == 0:
        return parse_range(expression)
    return _cached_parser(settings.cache_size)(expression)


def satisfies(
    version: Version | str,
    expression: str,
    settings: Settings | None = None,
) -> bool:
    """Return True if ``version`` is within the range ``expression``.

    Raises:
        RangeError: If the version or the expression is invalid.
        ConfigError: If ``settings`` is omitted and the environment holds an
            invalid setting.
    """
    v = version if isinstance(version, Version) else parse_version(version)
    return parse_range_cached(expression, settings)(v)


def max_satisfying(versions: Iterable[Version | str], expression: str) -> Version | None:
    """Return the highest version satisfying ``expression``, or None.

    Candidate strings that are not valid versions are skipped.
    """
    predicate = parse_range(expression)
    best: Version | None = None
    for candidate in versions:
        if isinstance(candidate, Version):
            v = candidate
        else:
            try:
                v = parse_version(candidate)
            except InvalidVersionError:
                log.debug("Skipping invalid candidate version %r", candidate)
                continue
        if predicate(v) and (best is None or v > best):
            best = v
    return best
