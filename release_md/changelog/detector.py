"""Version detection for released sections of the release file."""

import re
from typing import List

import structlog
from packaging import version
from packaging.version import InvalidVersion

from ..utils.constants import VERSION_HEADER_PATTERN

logger = structlog.get_logger(__name__)


class VersionDetector:
    """Detects and compares versions documented in the release file."""

    def __init__(self, version_pattern: str = VERSION_HEADER_PATTERN):
        """Initialize with the versioned heading pattern."""
        self.pattern = re.compile(version_pattern, re.MULTILINE)

    def extract_versions(self, content: str) -> List[str]:
        """Extract all version numbers from versioned headings, in document order."""
        versions = self.pattern.findall(content)
        logger.debug("Extracted versions", versions=versions)
        return versions

    def get_latest_version(self, content: str) -> str | None:
        """Get the highest documented version, ignoring versions that cannot be parsed."""
        parsed = []
        for candidate in self.extract_versions(content):
            try:
                parsed.append((version.parse(candidate), candidate))
            except InvalidVersion:
                logger.debug("Skipping unparsable version", version=candidate)

        if not parsed:
            return None

        return max(parsed, key=lambda item: item[0])[1]

    def is_version_documented(self, content: str, release_version: str) -> bool:
        """Check if a version already has a section in the release file."""
        return release_version.lstrip("vV") in self.extract_versions(content)
