"""Unit tests for the changelog.classifier module."""

import pytest

from release_md.changelog.classifier import classify, classify_unreleased
from release_md.changelog.models import BumpLevel


@pytest.mark.parametrize(
    "document,expected",
    [
        ("# Unreleased\n\n- BREAKING: drop Python 3.9\n- feat: add widget\n", BumpLevel.MAJOR),
        ("# Unreleased\n\n- Breaking change in the API\n", BumpLevel.MAJOR),
        ("# Unreleased\n\n- FEAT: add widget\n", BumpLevel.MINOR),
        ("# Unreleased\n\n- New Features page\n", BumpLevel.MINOR),
        ("# Unreleased\n\n- fix: off by one\n", BumpLevel.PATCH),
        ("# Unreleased\n\nDocumentation tweaks\n", BumpLevel.PATCH),
        ("# Unreleased\n\n   \n\t\n", BumpLevel.NONE),
        ("# Unreleased\n", BumpLevel.NONE),
        ("# Changelog\n\n- feat: not pending\n", BumpLevel.NONE),
        ("", BumpLevel.NONE),
    ],
)
def test_classify(document: str, expected: BumpLevel) -> None:
    """The bump level follows the breaking > feat > anything-else priority."""
    assert classify(document) == expected


def test_classify_round_trip_document(round_trip_document: str) -> None:
    """A pending feature entry is a minor release."""
    assert classify(round_trip_document) == BumpLevel.MINOR


def test_classify_ignores_released_sections() -> None:
    """Keywords in already released sections do not affect the result."""
    document = "# Unreleased\n\n- fix: a\n\n# v1.0.0 – 2023-01-01\n\n- BREAKING: old change\n- feat: old feature\n"
    assert classify(document) == BumpLevel.PATCH


def test_classify_is_pure(round_trip_document: str) -> None:
    """Classifying the same document repeatedly yields the same result."""
    assert classify(round_trip_document) == classify(round_trip_document)


def test_classify_unreleased_on_extracted_body() -> None:
    """The extracted body can be classified directly."""
    assert classify_unreleased("- feat: a\n- breaking: b") == BumpLevel.MAJOR
    assert classify_unreleased("") == BumpLevel.NONE


@pytest.mark.parametrize(
    "level,expected",
    [
        (BumpLevel.MAJOR, "major"),
        (BumpLevel.MINOR, "minor"),
        (BumpLevel.PATCH, "patch"),
        (BumpLevel.NONE, None),
    ],
)
def test_bump_level_to_release_type(level: BumpLevel, expected: str | None) -> None:
    """BumpLevel.NONE maps to no release."""
    assert level.to_release_type() == expected
