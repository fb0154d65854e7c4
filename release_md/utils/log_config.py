"""Configures structlog for the command line entry point."""

import logging
import sys
from pathlib import Path
from typing import Any

import structlog
from structlog.typing import EventDict, Processor

from release_md.utils.constants import DEFAULT_LOG_LEVEL, DEFAULT_SERVICE_NAME


def add_service_name(service_name: str) -> Processor:
    """Build a processor that tags every event with the service name."""

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def configure_logging(
    level: str = DEFAULT_LOG_LEVEL,
    json_output: bool = False,
    service_name: str = DEFAULT_SERVICE_NAME,
    silent: bool = False,
    log_file: Path | None = None,
) -> None:
    """Configure structlog processors, renderer and level filtering.

    Args:
        level: Minimum log level name (debug, info, warning, error, critical).
        json_output: Render events as JSON lines instead of console text.
        service_name: Name attached to every event under the "service" key.
        silent: Drop all output (useful when embedding the hooks in tests).
        log_file: Append events to this file instead of stderr. Missing parent
            directories are created.
    """
    renderer: Processor = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=False)
    processors: list[Processor] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_service_name(service_name),
        structlog.processors.format_exc_info,
        renderer,
    ]

    logger_factory: Any
    if silent:
        logger_factory = structlog.ReturnLoggerFactory()
    elif log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger_factory = structlog.PrintLoggerFactory(file=log_file.open("a", encoding="utf-8"))
    else:
        logger_factory = structlog.PrintLoggerFactory(file=sys.stderr)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level.upper())),
        logger_factory=logger_factory,
        cache_logger_on_first_use=False,
    )
