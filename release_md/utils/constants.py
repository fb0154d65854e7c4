"""Shared constants used across the application."""

import re

# Release File Constants
# ----------------------

DEFAULT_RELEASE_FILE = "RELEASE.md"
"""Default path to the release file holding the Unreleased section."""

DEFAULT_RELEASE_BRANCH = "main"
"""The single long-lived branch that is eligible for releases."""

DEFAULT_TAG_FORMAT = "v{version}"
"""Template used to turn a bare version into a tag / section label."""

UNRELEASED_TITLE = "Unreleased"
"""Title of the heading accumulating not-yet-released entries."""

VERSION_DATE_SEPARATOR = "–"
"""En dash placed between the version and the release date in section headings."""

# Regex Patterns
UNRELEASED_SECTION_PATTERN = re.compile(
    r"^[ \t]*#+[ \t]*Unreleased[ \t]*(?P<newline>\r?\n|\Z)(?P<body>[\s\S]*?)(?=^#|\Z)",
    re.IGNORECASE | re.MULTILINE,
)
"""Pattern to match the Unreleased heading line and its body up to the next heading line."""

VERSION_HEADER_PATTERN = r"^[ \t]*#+[ \t]*v?(\d+\.\d+\.\d+[0-9A-Za-z.+-]*)[ \t]*[–-]"
"""Pattern to match versioned headings in the release file (e.g., # v1.2.3 – 2024-01-01)."""

# Logging Defaults
# ----------------

DEFAULT_LOG_LEVEL = "info"
"""Default minimum log level."""

DEFAULT_SERVICE_NAME = "release-md"
"""Service name attached to every log event."""
