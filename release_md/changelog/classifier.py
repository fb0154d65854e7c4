"""Infer a release bump level from the Unreleased section."""

import structlog

from .extractor import extract_unreleased, has_meaningful_content
from .models import BumpLevel

logger = structlog.get_logger(__name__)

BREAKING_KEYWORD = "breaking"
FEATURE_KEYWORD = "feat"


def classify_unreleased(unreleased: str) -> BumpLevel:
    """Classify an already extracted Unreleased body.

    Keywords are matched as case-insensitive substrings, so "Features" counts
    as a feature. A body mentioning both a breaking change and a feature is a
    major release.
    """
    if not has_meaningful_content(unreleased):
        return BumpLevel.NONE

    lowered = unreleased.lower()
    if BREAKING_KEYWORD in lowered:
        return BumpLevel.MAJOR
    if FEATURE_KEYWORD in lowered:
        return BumpLevel.MINOR
    return BumpLevel.PATCH


def classify(document: str) -> BumpLevel:
    """Return the bump level implied by the Unreleased section of a release file.

    Args:
        document: Full text of the release file.

    Returns:
        BumpLevel.NONE when the section is missing or blank, otherwise MAJOR,
        MINOR or PATCH.
    """
    unreleased = extract_unreleased(document)
    level = classify_unreleased(unreleased)
    logger.debug("Classified Unreleased section", length=len(unreleased), bump_level=level.value)
    return level
