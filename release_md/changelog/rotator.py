"""Rotate the Unreleased section of a release file into a dated, versioned section."""

import structlog

from ..utils.constants import UNRELEASED_TITLE, VERSION_DATE_SEPARATOR
from .extractor import find_unreleased_section, has_meaningful_content
from .models import RotationResult

logger = structlog.get_logger(__name__)


def build_unreleased_header(newline: str = "\n") -> str:
    """Build the empty Unreleased heading left behind after a rotation."""
    return f"# {UNRELEASED_TITLE}{newline}{newline}"


def build_version_header(version: str, date_iso: str, newline: str = "\n") -> str:
    """Build the heading of a released section (e.g., '# v1.2.0 – 2024-06-01')."""
    return f"# {version} {VERSION_DATE_SEPARATOR} {date_iso}{newline}{newline}"


def rotate(document: str, version: str, date_iso: str) -> RotationResult:
    """Move the Unreleased body into a new section directly below the Unreleased heading.

    The Unreleased heading is kept (reset to an empty body) and the new
    section is inserted before all previously released sections. Nothing else
    in the document is touched.

    The insertion point is the first occurrence of the rebuilt Unreleased
    heading text. If that exact text also appears earlier in the document
    (for example inside a code block), the new section lands there instead.

    Args:
        document: Full text of the release file.
        version: Label of the release, used verbatim in the heading (e.g., 'v1.2.0').
        date_iso: Release date in ISO-8601 format.

    Returns:
        RotationResult with changed=False and the untouched document when the
        Unreleased section is missing or blank, otherwise changed=True and the
        rebuilt document.
    """
    match = find_unreleased_section(document)
    unreleased = match.group("body").strip() if match else ""
    if match is None or not has_meaningful_content(unreleased):
        logger.debug("No Unreleased entries to rotate; leaving release file unchanged")
        return RotationResult(changed=False, result=document)

    newline = "\r\n" if match.group("newline") == "\r\n" else "\n"
    unreleased_header = build_unreleased_header(newline)
    version_header = build_version_header(version, date_iso, newline)

    # Clear the Unreleased section, keeping only a fresh heading.
    cleared = document[: match.start()] + unreleased_header + document[match.end() :]

    rebuilt = cleared.replace(
        unreleased_header,
        f"{unreleased_header}{version_header}{unreleased}{newline}{newline}",
        1,
    )

    logger.debug("Rotated Unreleased section", version=version, date=date_iso)
    return RotationResult(changed=True, result=rebuilt)
