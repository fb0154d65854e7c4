"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_RELEASE_BRANCH,
    DEFAULT_RELEASE_FILE,
    DEFAULT_TAG_FORMAT,
    UNRELEASED_SECTION_PATTERN,
    VERSION_HEADER_PATTERN,
)
from .files import read_file_safe, write_file

__all__ = [
    "UNRELEASED_SECTION_PATTERN",
    "VERSION_HEADER_PATTERN",
    "DEFAULT_RELEASE_FILE",
    "DEFAULT_RELEASE_BRANCH",
    "DEFAULT_TAG_FORMAT",
    "read_file_safe",
    "write_file",
]
