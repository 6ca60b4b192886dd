from __future__ import annotations

import pytest

from semver_range import InvalidVersionError, MalformedTermError
from semver_range.parsers.shorthand import expand_caret, expand_hyphen, expand_term, expand_tilde


@pytest.mark.parametrize(
    ("term", "rendered"),
    [
        ("~1.2.3", ">=1.2.3 <1.3.0"),
        ("~0.0.3", ">=0.0.3 <0.1.0"),
        ("~1.2", ">=1.2.0 <1.3.0"),
        ("~1.2.x", ">=1.2.0 <1.3.0"),
        ("~1", ">=1.0.0 <2.0.0"),
        ("~v1.x", ">=1.0.0 <2.0.0"),
    ],
)
def test_expand_tilde(term: str, rendered: str) -> None:
    assert str(expand_tilde(term)) == rendered


@pytest.mark.parametrize(
    ("term", "rendered"),
    [
        ("^1.2.3", ">=1.2.3 <2.0.0"),
        ("^0.2.3", ">=0.2.3 <0.3.0"),
        ("^0.0.3", ">=0.0.3 <0.0.4"),
        ("^v0.2.3", ">=0.2.3 <0.3.0"),
        ("^10.x", ">=10.0.0 <11.0.0"),
        ("^10.1.x", ">=10.1.0 <11.0.0"),
        ("^0.1.x", ">=0.1.0 <0.2.0"),
        ("^0.0.x", ">=0.0.0 <0.1.0"),
        ("^0.x", ">=0.0.0 <1.0.0"),
        ("^1.2", ">=1.2.0 <2.0.0"),
    ],
)
def test_expand_caret(term: str, rendered: str) -> None:
    assert str(expand_caret(term)) == rendered


@pytest.mark.parametrize("term", ["^x", "^*", "~X", "^v*"])
def test_shorthand_requires_a_numeric_component(term: str) -> None:
    with pytest.raises(InvalidVersionError):
        expand_term(term)


@pytest.mark.parametrize("term", ["^", "~"])
def test_shorthand_requires_a_version(term: str) -> None:
    with pytest.raises(MalformedTermError):
        expand_term(term)


def test_shorthand_cannot_follow_a_comparator() -> None:
    with pytest.raises(MalformedTermError):
        expand_term(">=^1.2.3")


@pytest.mark.parametrize(
    ("lower", "upper", "rendered"),
    [
        ("1", "3", ">=1.0.0 <4.0.0"),
        ("v1", "v3", ">=1.0.0 <4.0.0"),
        ("1.2.3", "2.3.4", ">=1.2.3 <=2.3.4"),
        ("1.2", "2.3", ">=1.2.0 <2.4.0"),
        ("*", "2.3.4", "* <=2.3.4"),
    ],
)
def test_expand_hyphen(lower: str, upper: str, rendered: str) -> None:
    assert str(expand_hyphen(lower, upper)) == rendered


def test_hyphen_bounds_must_be_plain_versions() -> None:
    with pytest.raises(MalformedTermError):
        expand_hyphen(">=1.0.0", "2.0.0")


def test_expand_term_dispatch() -> None:
    assert str(expand_term("!=1.2.3")) == "!=1.2.3"
    assert str(expand_term("1.x")) == ">=1.0.0 <2.0.0"
