"""Version normalization and equality for CI task versions.

CI task manifests report versions inconsistently: bare majors (``"2"``),
``major.minor`` pairs (``"2.1"``) or full semantic versions
(``"2.1.0-beta"``). Versions are coerced to ``major.minor.patch`` and compared
as semantic versions; anything that still is not valid semver is compared
as a plain string.
"""

import logging
import string
from typing import Optional

import semver

logger = logging.getLogger(__name__)

_DIGITS = frozenset(string.digits)


def _coerce(version: str) -> str:
    """Pad a bare major or ``major.minor`` version to three components."""
    if set(version) <= _DIGITS:
        return f"{version}.0.0"
    if version.count(".") == 1:
        return f"{version}.0"
    return version


def normalize(version: str) -> Optional[semver.Version]:
    """Return the canonical semantic version for ``version``, or None."""
    candidate = _coerce(version)
    try:
        return semver.Version.parse(candidate)
    except ValueError as e:
        logger.debug(f"Not a semantic version {version!r}: {e}")
        return None


def version_eq(a: str, b: str) -> bool:
    """Check two version strings for equality.

    Semantic equality applies when both versions normalize; build metadata is
    ignored and prerelease tags are compared exactly. Otherwise the original
    strings must match exactly.
    """
    left = normalize(a)
    right = normalize(b)
    if left is not None and right is not None:
        return left == right
    return a == b


class VersionComparator:
    """Injectable facade over :func:`normalize` and :func:`version_eq`."""

    normalize = staticmethod(normalize)
    version_eq = staticmethod(version_eq)
