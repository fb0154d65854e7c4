"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass, field
from pathlib import Path

from release_md.utils.constants import DEFAULT_RELEASE_BRANCH, DEFAULT_RELEASE_FILE, DEFAULT_TAG_FORMAT


@dataclass
class HookConfig:
    """Configuration handed explicitly to every release hook."""

    release_file: Path = field(default_factory=lambda: Path(DEFAULT_RELEASE_FILE))
    release_branch: str = DEFAULT_RELEASE_BRANCH
    tag_format: str = DEFAULT_TAG_FORMAT


@dataclass
class LoggingConfig:
    """Configuration of the structlog pipeline."""

    level: str
    json_output: bool
    service_name: str
    silent: bool
    log_file: Path | None = None
