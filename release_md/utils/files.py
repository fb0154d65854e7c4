"""Contains utility functions for reading and writing the release file."""

from pathlib import Path
from typing import Any

import structlog

logger = structlog.get_logger(__name__)


def read_file_safe(path: Path | str, log: Any = None) -> str:
    """Read a text file, treating a missing or unreadable file as empty.

    Args:
        path: Path to the file to read.
        log: Optional logger to report the failure to (defaults to the module logger).

    Returns:
        The file content, or an empty string if the file could not be read.
    """
    log = log or logger
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        log.info("Release file could not be read; treating it as empty", path=str(path), error=str(e))
        return ""


def write_file(path: Path | str, content: str) -> None:
    """Write the full content of a text file.

    Errors are not caught here; a failed write must abort the release run.
    """
    # newline="" keeps \r\n line endings untouched in both directions.
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
