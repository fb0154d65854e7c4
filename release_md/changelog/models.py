"""Data models for release file classification, rotation and notes merging."""

import datetime
import logging
from enum import Enum
from typing import Any, Protocol

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

LOGGER_METHODS = ("debug", "info", "warning")


class BumpLevel(str, Enum):
    """Semantic-versioning increment inferred from the Unreleased section."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    NONE = "none"

    def to_release_type(self) -> str | None:
        """Return the release type handed to the orchestrator, or None for no release."""
        if self is BumpLevel.NONE:
            return None
        return self.value


class ContextLogger(Protocol):
    """Logger interface the hooks report progress to."""

    def debug(self, event: str, **kw: Any) -> Any: ...

    def info(self, event: str, **kw: Any) -> Any: ...

    def warning(self, event: str, **kw: Any) -> Any: ...


class LogMethodAdapter:
    """Adapts a logger exposing a single log(*args) method to the ContextLogger interface.

    Key/value context is passed as a trailing mapping argument.
    """

    def __init__(self, logger: Any) -> None:
        """Initialize with the wrapped logger."""
        self.logger = logger

    def _log(self, event: str, kw: dict[str, Any]) -> Any:
        if kw:
            return self.logger.log(event, kw)
        return self.logger.log(event)

    def debug(self, event: str, **kw: Any) -> Any:
        return self._log(event, kw)

    def info(self, event: str, **kw: Any) -> Any:
        return self._log(event, kw)

    def warning(self, event: str, **kw: Any) -> Any:
        return self._log(event, kw)


class RotationResult(BaseModel):
    """Result of rotating the Unreleased section into a versioned section."""

    changed: bool
    result: str


class NextRelease(BaseModel):
    """The release the orchestrator is about to publish."""

    model_config = ConfigDict(extra="ignore")

    version: str | None = None


class HookContext(BaseModel):
    """Context handed to the analyze and prepare hooks."""

    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True, extra="ignore")

    logger: Any = None
    next_release: NextRelease | None = Field(default=None, alias="nextRelease")
    branch: str | None = None
    date: datetime.date | None = None

    @field_validator("logger")
    @classmethod
    def check_logger(cls, value: Any) -> ContextLogger | None:
        """Accept structlog-style loggers and wrap loggers that only offer a log() method."""
        if value is None:
            return None
        if isinstance(value, logging.Logger):
            return structlog.wrap_logger(value)
        if all(callable(getattr(value, method, None)) for method in LOGGER_METHODS):
            return value
        if callable(getattr(value, "log", None)):
            return LogMethodAdapter(value)
        raise ValueError("logger must provide debug, info and warning methods or a log method")


class NotesContext(BaseModel):
    """Context handed to the notes generation hook.

    Unknown keys are kept so the surrounding pipeline gets them back untouched.
    """

    model_config = ConfigDict(extra="allow")

    notes: str | None = None
