"""Reconciles configuration between CLI arguments and environment variables."""

from pathlib import Path

from release_md.configuration.env import Settings
from release_md.configuration.models import HookConfig, LoggingConfig
from release_md.utils.helpers import validate_tag_format


def reconcile_hook_configuration(
    settings: Settings,
    cli_release_file: Path | None = None,
    cli_release_branch: str | None = None,
    cli_tag_format: str | None = None,
) -> HookConfig:
    """Reconciles the hook configuration, preferring CLI arguments over settings.

    Args:
        settings (Settings): Settings loaded from the environment.
        cli_release_file (Path | None): Release file path given on the command line.
        cli_release_branch (str | None): Release branch given on the command line.
        cli_tag_format (str | None): Tag format given on the command line.

    Returns:
        HookConfig: The configuration to hand to the release hooks.

    Raises:
        InvalidTagFormatError: If the CLI tag format does not have exactly one {version} field.
    """
    return HookConfig(
        release_file=cli_release_file if cli_release_file is not None else settings.RELEASE_FILE,
        release_branch=cli_release_branch or settings.RELEASE_BRANCH,
        tag_format=validate_tag_format(cli_tag_format) if cli_tag_format else settings.TAG_FORMAT,
    )


def reconcile_logging_configuration(
    settings: Settings,
    cli_debug: bool = False,
    cli_log_json: bool | None = None,
) -> LoggingConfig:
    """Reconciles the logging configuration.

    Debug mode from either source forces the debug log level.
    """
    level = "debug" if cli_debug or settings.DEBUG else settings.LOG_LEVEL
    return LoggingConfig(
        level=level,
        json_output=settings.LOG_JSON if cli_log_json is None else cli_log_json,
        service_name=settings.SERVICE_NAME,
        silent=settings.LOG_SILENT,
        log_file=settings.LOG_FILE,
    )
