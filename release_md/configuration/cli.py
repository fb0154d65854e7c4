"""Defines the Command Line Interface (CLI) using Typer."""

from pathlib import Path

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from typer import Argument, Option
from typing_extensions import Annotated

from release_md import hooks
from release_md.changelog import VersionDetector, classify, extract_unreleased, merge_release_notes, rotate
from release_md.configuration.env import load_settings
from release_md.configuration.exceptions import InvalidReleaseDateError, InvalidTagFormatError
from release_md.configuration.models import HookConfig
from release_md.configuration.reconcile import reconcile_hook_configuration, reconcile_logging_configuration
from release_md.utils.files import read_file_safe
from release_md.utils.helpers import format_tag, parse_release_date, today_iso
from release_md.utils.log_config import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Classify and rotate the Unreleased section of a release file.")


@typer_app.callback()
def main_callback(
    ctx: typer.Context,
    release_file: Annotated[Path | None, Option(envvar="RELEASE_FILE", help="Path to the release file.")] = None,
    release_branch: Annotated[str | None, Option(envvar="RELEASE_BRANCH", help="Branch eligible for releases.")] = None,
    tag_format: Annotated[str | None, Option(envvar="TAG_FORMAT", help="Tag format, e.g. 'v{version}'.")] = None,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
    log_json: Annotated[bool | None, Option("--log-json/--log-text", help="Render logs as JSON lines.")] = None,
    log_file: Annotated[Path | None, Option(envvar="LOG_FILE", help="Append logs to this file instead of stderr.")] = None,
) -> None:
    """Load settings, configure logging and store the hook configuration on the context."""
    try:
        settings = load_settings()
    except ValidationError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(1) from exc
    logging_config = reconcile_logging_configuration(settings, cli_debug=debug, cli_log_json=log_json)
    configure_logging(
        level=logging_config.level,
        json_output=logging_config.json_output,
        service_name=logging_config.service_name,
        silent=logging_config.silent,
        log_file=log_file or logging_config.log_file,
    )
    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = reconcile_hook_configuration(
            settings,
            cli_release_file=release_file,
            cli_release_branch=release_branch,
            cli_tag_format=tag_format,
        )
    except InvalidTagFormatError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


@typer_app.command(name="unreleased")
def unreleased_cli(ctx: typer.Context) -> None:
    """Print the body of the Unreleased section."""
    config: HookConfig = ctx.obj["config"]
    typer.echo(extract_unreleased(read_file_safe(config.release_file)))


@typer_app.command(name="analyze")
def analyze_cli(
    ctx: typer.Context,
    branch: Annotated[str | None, Option(envvar="BRANCH", help="Branch being released; non-release branches never release.")] = None,
) -> None:
    """Print the release type implied by the Unreleased section (major, minor, patch or none)."""
    config: HookConfig = ctx.obj["config"]
    release_type = hooks.analyze_commits(config, {"branch": branch})
    typer.echo(release_type or "none")


@typer_app.command(name="prepare")
def prepare_cli(
    ctx: typer.Context,
    version: Annotated[str, Argument(help="Version being released (e.g. 1.2.0).")],
    release_date: Annotated[str | None, Option("--date", help="Release date (YYYY-MM-DD). Defaults to today (UTC).")] = None,
    dry_run: Annotated[bool, Option("--dry-run", help="Print the rotated release file instead of writing it.")] = False,
) -> None:
    """Move the Unreleased entries into a new versioned section."""
    config: HookConfig = ctx.obj["config"]

    try:
        date_iso = parse_release_date(release_date) if release_date else today_iso()
    except InvalidReleaseDateError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    if dry_run:
        result = rotate(read_file_safe(config.release_file), format_tag(version, config.tag_format), date_iso)
        if not result.changed:
            typer.echo("No Unreleased entries to rotate.")
            return
        typer.echo(result.result)
        return

    try:
        result = hooks.prepare(config, {"next_release": {"version": version}, "date": date_iso})
    except OSError as exc:
        typer.echo(f"Error writing release file {config.release_file}: {exc}", err=True)
        raise typer.Exit(1) from exc

    if result is None or not result.changed:
        typer.echo("No Unreleased entries to rotate.")
        return
    typer.echo(f"Rotated Unreleased entries into {format_tag(version, config.tag_format)} ({date_iso}) in {config.release_file}")


@typer_app.command(name="notes")
def notes_cli(
    ctx: typer.Context,
    notes: Annotated[str | None, Option("--notes", help="Release notes generated by the pipeline.")] = None,
    notes_file: Annotated[Path | None, Option("--notes-file", help="File holding the generated release notes.")] = None,
) -> None:
    """Print the release notes with the Unreleased entries prepended."""
    config: HookConfig = ctx.obj["config"]
    if notes_file is not None:
        if not notes_file.exists():
            typer.echo(f"Notes file not found: {notes_file.absolute()}", err=True)
            raise typer.Exit(1)
        notes = notes_file.read_text(encoding="utf-8")
    typer.echo(merge_release_notes(read_file_safe(config.release_file), notes))


@typer_app.command(name="status")
def status_cli(ctx: typer.Context) -> None:
    """Print the latest documented version and the pending release type."""
    config: HookConfig = ctx.obj["config"]
    content = read_file_safe(config.release_file)
    latest = VersionDetector().get_latest_version(content)
    typer.echo(f"Release file: {config.release_file}")
    typer.echo(f"Latest documented version: {latest or 'none'}")
    typer.echo(f"Pending release type: {classify(content).value}")


if __name__ == "__main__":
    typer_app()
