"""Unit tests for the utils.files module."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from release_md.utils.files import read_file_safe, write_file


def test_read_file_safe_returns_content(tmp_path: Path) -> None:
    """Existing files are read in full."""
    path = tmp_path / "RELEASE.md"
    path.write_text("# Unreleased\n\n- fix: a\n", encoding="utf-8")
    assert read_file_safe(path) == "# Unreleased\n\n- fix: a\n"


def test_read_file_safe_missing_file(tmp_path: Path) -> None:
    """A missing file reads as empty and is reported at info level."""
    logger = MagicMock()
    assert read_file_safe(tmp_path / "missing.md", logger) == ""
    logger.info.assert_called_once()
    assert logger.info.call_args.args[0] == "Release file could not be read; treating it as empty"


def test_read_file_safe_directory(tmp_path: Path) -> None:
    """An unreadable path reads as empty."""
    assert read_file_safe(tmp_path) == ""


def test_write_file_keeps_line_endings(tmp_path: Path) -> None:
    """Content is written byte for byte, including Windows line endings."""
    path = tmp_path / "RELEASE.md"
    write_file(path, "# Unreleased\r\n\r\n")
    assert path.read_bytes() == b"# Unreleased\r\n\r\n"
    assert read_file_safe(path) == "# Unreleased\r\n\r\n"


def test_write_file_propagates_errors(tmp_path: Path) -> None:
    """Write errors are not swallowed."""
    with pytest.raises(OSError):
        write_file(tmp_path / "missing-dir" / "RELEASE.md", "content")
