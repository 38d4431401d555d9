"""Version comparison and update checking."""

from .errors import InvalidVersionFormat
from .comparator import VersionNumber, compare_version

__all__ = ['InvalidVersionFormat', 'VersionNumber', 'compare_version']
