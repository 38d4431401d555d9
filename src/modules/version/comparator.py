"""Comparison of dotted-triplet version strings against a running version."""

import re
from dataclasses import dataclass
from typing import Any, Tuple

from .errors import InvalidVersionFormat

# Signed ASCII decimal integer, optionally padded with whitespace
_COMPONENT_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")

VERSION_PART_COUNT = 3


def _parse_component(version: str, part: str) -> int:
    if not _COMPONENT_PATTERN.match(part):
        raise InvalidVersionFormat(version, f"'{part}' is not an integer")
    return int(part)


@dataclass(frozen=True, order=True)
class VersionNumber:
    """A major.minor.build version. Ordering is lexicographic over the fields."""
    major: int
    minor: int
    build: int

    @classmethod
    def parse(cls, version: str) -> 'VersionNumber':
        """Parse a dotted triplet such as ``2.1.0``.

        Raises:
            InvalidVersionFormat: If the string does not have exactly three parts
                or a part is not an integer
        """
        parts = version.split(".")
        if len(parts) != VERSION_PART_COUNT:
            raise InvalidVersionFormat(
                version,
                f"expected {VERSION_PART_COUNT} dot-separated parts, found {len(parts)}"
            )
        major, minor, build = (_parse_component(version, part) for part in parts)
        return cls(major, minor, build)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.build}"


def _as_tuple(version: Any) -> Tuple[int, int, int]:
    return (version.major, version.minor, version.build)


def compare_version(candidate: str, reference: Any) -> int:
    """Compare a version string against a structured version.

    Args:
        candidate: Dotted triplet, e.g. the version published by an update manifest
        reference: Any value with integer ``major``, ``minor`` and ``build`` attributes

    Returns:
        int: -1 if candidate is older than reference, 0 if equal, 1 if newer

    Raises:
        InvalidVersionFormat: If candidate is not a valid dotted triplet
    """
    parsed = _as_tuple(VersionNumber.parse(candidate))
    expected = _as_tuple(reference)
    if parsed < expected:
        return -1
    if parsed > expected:
        return 1
    return 0
