"""General utility functions and helper classes."""

import datetime
from string import Formatter

from release_md.configuration.exceptions import InvalidReleaseDateError, InvalidTagFormatError
from release_md.utils.constants import DEFAULT_TAG_FORMAT


def validate_tag_format(tag_format: str) -> str:
    """Check a tag format and return it normalized.

    The template-literal spelling '${version}' is accepted and turned into
    '{version}'. The only replacement field allowed is 'version'.
    """
    normalized = tag_format.replace("${version}", "{version}")
    try:
        fields = [field for _, field, _, _ in Formatter().parse(normalized) if field is not None]
    except ValueError as e:
        raise InvalidTagFormatError(f"Invalid tag format '{tag_format}': {e}") from e
    if fields != ["version"]:
        raise InvalidTagFormatError(f"Invalid tag format '{tag_format}', expected exactly one {{version}} field")
    return normalized


def format_tag(version: str, tag_format: str = DEFAULT_TAG_FORMAT) -> str:
    """Format a version as a tag (e.g., '1.2.0' -> 'v1.2.0') without prefixing it twice."""
    tag_format = validate_tag_format(tag_format)
    prefix = tag_format.split("{version", 1)[0]
    if prefix and version.startswith(prefix):
        return version
    return tag_format.format(version=version)


def today_iso() -> str:
    """Return today's UTC date in ISO-8601 format."""
    return datetime.datetime.now(datetime.timezone.utc).date().isoformat()


def parse_release_date(value: str) -> str:
    """Validate an ISO-8601 date string and return it normalized."""
    try:
        return datetime.date.fromisoformat(value).isoformat()
    except ValueError as e:
        raise InvalidReleaseDateError(f"Invalid release date '{value}', expected YYYY-MM-DD") from e
