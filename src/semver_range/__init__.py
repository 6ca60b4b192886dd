"""semver_range: semantic-version range expressions as reusable predicates.

    >>> from semver_range import parse_range, parse_version
    >>> in_range = parse_range(">=1.2.3 <2.0.0 || ^3.1.0")
    >>> in_range(parse_version("3.4.0"))
    True
"""

from .config import ConfigError, Settings, load_settings
from .core import (
    max_satisfying,
    must_parse_range,
    parse_range,
    parse_range_cached,
    satisfies,
)
from .errors import (
    InvalidVersionError,
    LexicalError,
    MalformedTermError,
    RangeError,
    RangeParseFailure,
)
from .models import (
    AllOf,
    AnyOf,
    AtomicComparison,
    Comparator,
    Constant,
    FunctionPredicate,
    Predicate,
    all_of,
    any_of,
    as_predicate,
)
from .parsers.comparators import parse_comparator
from .parsers.terms import split_term
from .parsers.wildcards import build_atomic_comparison
from .version import Version, parse_version

__all__ = [
    "AllOf",
    "AnyOf",
    "AtomicComparison",
    "Comparator",
    "ConfigError",
    "Constant",
    "FunctionPredicate",
    "InvalidVersionError",
    "LexicalError",
    "MalformedTermError",
    "Predicate",
    "RangeError",
    "RangeParseFailure",
    "Settings",
    "Version",
    "all_of",
    "any_of",
    "as_predicate",
    "build_atomic_comparison",
    "load_settings",
    "max_satisfying",
    "must_parse_range",
    "parse_comparator",
    "parse_range",
    "parse_range_cached",
    "parse_version",
    "satisfies",
    "split_term",
]
