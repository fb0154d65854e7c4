"""Fixtures for unit tests."""

from pathlib import Path
from typing import Generator

import pytest
import structlog

ROUND_TRIP_DOCUMENT = "# Unreleased\n\n- feat: add widget\n\n# v1.0.0 – 2023-01-01\n\n- fix: bug\n"
ROUND_TRIP_ROTATED = "# Unreleased\n\n# v1.1.0 – 2024-06-01\n\n- feat: add widget\n\n# v1.0.0 – 2023-01-01\n\n- fix: bug\n"


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def round_trip_document() -> str:
    """A release file with pending feature entries and one released section."""
    return ROUND_TRIP_DOCUMENT


@pytest.fixture
def release_file(tmp_path: Path, round_trip_document: str) -> Path:
    """Write the round trip document to a release file in a temporary directory."""
    path = tmp_path / "RELEASE.md"
    path.write_text(round_trip_document, encoding="utf-8")
    return path


@pytest.fixture
def round_trip_rotated() -> str:
    """The round trip document after releasing v1.1.0 on 2024-06-01."""
    return ROUND_TRIP_ROTATED
