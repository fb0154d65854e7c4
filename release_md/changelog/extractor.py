"""Extract the Unreleased section from a release file."""

import re

from ..utils.constants import UNRELEASED_SECTION_PATTERN


def find_unreleased_section(document: str) -> re.Match[str] | None:
    """Locate the first Unreleased heading and its body.

    The match spans the heading line and everything up to (but not
    including) the next line beginning with ``#``, or the end of the document.
    """
    return UNRELEASED_SECTION_PATTERN.search(document)


def extract_unreleased(document: str) -> str:
    """Return the trimmed body of the Unreleased section.

    Args:
        document: Full text of the release file.

    Returns:
        The body text, or an empty string when there is no Unreleased heading.
    """
    match = find_unreleased_section(document)
    if match is None:
        return ""
    return match.group("body").strip()


def has_meaningful_content(block: str) -> bool:
    """Check whether at least one line of the block is non-blank."""
    return any(line.strip() for line in block.splitlines())
