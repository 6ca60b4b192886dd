"""Version parsing on top of packaging.version.

``packaging`` is lenient (``1.2``, ``1.2.3.4`` and ``01.2.3`` all parse) and
orders suffixes by PEP 440 rather than semver: ``1.2.3-1`` is a post-release
and ``1.2.3+build`` a local version, both above ``1.2.3``. Tokens are therefore
checked against the subset of semver whose PEP 440 reading orders the same way
before being handed over:

- ``MAJOR.MINOR.PATCH``
- ``MAJOR.MINOR.PATCH-alpha``, ``-beta``, ``-rc``, optionally followed by
  ``.N`` with N >= 1 (``alpha`` < ``alpha.1`` < ``alpha.2`` < ``beta`` < ``rc``)

Build metadata and any other prerelease identifiers are rejected.
"""

from __future__ import annotations

import re

from packaging.version import Version

from .errors import InvalidVersionError

__all__ = [
    "Version",
    "format_version",
    "next_major",
    "next_minor",
    "next_patch",
    "parse_version",
]

_SEMVER_PATTERN = re.compile(
    r"(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)(?:-(alpha|beta|rc)(?:\.([1-9][0-9]*))?)?"
)

# PEP 440 prerelease phase -> semver identifier.
_PRERELEASE_NAMES = {"a": "alpha", "b": "beta", "rc": "rc"}


def parse_version(raw: str) -> Version:
    """Return the version for ``MAJOR.MINOR.PATCH[-alpha|-beta|-rc[.N]]`` text.

    Raises:
        InvalidVersionError: If the text is not a semantic version, or carries
            build metadata or a prerelease that PEP 440 would order differently.
    """
    text = str(raw).strip()
    if not _SEMVER_PATTERN.fullmatch(text):
        raise InvalidVersionError(f"invalid version '{raw}'")
    return Version(text)


def format_version(v: Version) -> str:
    """Render ``v`` in semver syntax, the inverse of ``parse_version``.

    Versions that ``parse_version`` cannot produce fall back to ``str(v)``.
    """
    if len(v.release) != 3 or v.post is not None or v.dev is not None or v.local:
        return str(v)
    text = f"{v.major}.{v.minor}.{v.micro}"
    if v.pre is not None:
        phase, number = v.pre
        text += f"-{_PRERELEASE_NAMES[phase]}"
        if number:
            text += f".{number}"
    return text


def next_major(v: Version) -> Version:
    return Version(f"{v.major + 1}.0.0")


def next_minor(v: Version) -> Version:
    return Version(f"{v.major}.{v.minor + 1}.0")


def next_patch(v: Version) -> Version:
    return Version(f"{v.major}.{v.minor}.{v.micro + 1}")
