"""Unit tests for the VersionDetector class."""

from release_md.changelog.detector import VersionDetector

RELEASE_FILE = """# Unreleased

- feat: pending

# v1.2.0 – 2023-03-01

- feat: b

# v1.10.0 – 2023-09-01

- feat: c

# v1.0.0 – 2023-01-01

- fix: a
"""


def test_extract_versions_in_document_order() -> None:
    """Versions are returned without the 'v' prefix, in document order."""
    assert VersionDetector().extract_versions(RELEASE_FILE) == ["1.2.0", "1.10.0", "1.0.0"]


def test_get_latest_version_uses_version_ordering() -> None:
    """The latest version is chosen by version ordering, not string ordering."""
    assert VersionDetector().get_latest_version(RELEASE_FILE) == "1.10.0"


def test_get_latest_version_without_versions() -> None:
    """No versioned heading means no latest version."""
    assert VersionDetector().get_latest_version("# Unreleased\n\n- fix: a\n") is None


def test_get_latest_version_skips_unparsable_versions() -> None:
    """Versions that cannot be parsed are ignored."""
    content = "# v1.0.0-foo.bar – 2024-01-01\n\n# v0.9.0 – 2023-01-01\n"
    detector = VersionDetector()
    assert detector.extract_versions(content) == ["1.0.0-foo.bar", "0.9.0"]
    assert detector.get_latest_version(content) == "0.9.0"


def test_is_version_documented() -> None:
    """Versions are recognized with or without the 'v' prefix."""
    detector = VersionDetector()
    assert detector.is_version_documented(RELEASE_FILE, "1.2.0") is True
    assert detector.is_version_documented(RELEASE_FILE, "v1.2.0") is True
    assert detector.is_version_documented(RELEASE_FILE, "1.2") is False
    assert detector.is_version_documented(RELEASE_FILE, "2.0.0") is False
