"""Release hooks called by the release orchestrator.

The orchestrator runs the hooks strictly in sequence during one release:

1. ``analyze_commits`` decides whether (and what) to release,
2. ``prepare`` rotates the release file once the version is known,
3. ``generate_notes`` merges the Unreleased entries into the release notes.

Every hook re-reads the release file, so each one sees the latest state on
disk. Only ``prepare`` writes the file.
"""

from collections.abc import Mapping, MutableMapping
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from release_md.changelog import (
    HookContext,
    NotesContext,
    RotationResult,
    VersionDetector,
    classify_unreleased,
    extract_unreleased,
    merge_release_notes,
    rotate,
)
from release_md.configuration.exceptions import HookContextError
from release_md.configuration.models import HookConfig
from release_md.utils.files import read_file_safe, write_file
from release_md.utils.helpers import format_tag, today_iso

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _validate_context(hook: str, model: type[ModelT], context: Any) -> ModelT:
    if isinstance(context, model):
        return context
    try:
        return model.model_validate(context)
    except ValidationError as ve:
        raise HookContextError(hook, ve.errors()) from ve


def analyze_commits(config: HookConfig, context: HookContext | Mapping[str, Any]) -> str | None:
    """Decide the release type from the Unreleased section of the release file.

    Args:
        config: Hook configuration (release file path, release branch).
        context: Release context; only the optional logger and branch are used.

    Returns:
        'major', 'minor' or 'patch', or None when nothing should be released.
    """
    ctx = _validate_context("analyze_commits", HookContext, context)
    log = ctx.logger or logger

    if ctx.branch is not None and ctx.branch != config.release_branch:
        log.info("Branch is not a release branch; skipping release", branch=ctx.branch, release_branch=config.release_branch)
        return None

    content = read_file_safe(config.release_file, log)
    if not content:
        log.info("Release file not found or empty; skipping release", path=str(config.release_file))
        return None

    unreleased = extract_unreleased(content)
    log.info("Parsed Unreleased block", length=len(unreleased))

    level = classify_unreleased(unreleased)
    release_type = level.to_release_type()
    if release_type is None:
        log.info("Unreleased section empty; skipping release")
    else:
        log.info("Determined release type from Unreleased section", release_type=release_type)
    return release_type


def prepare(config: HookConfig, context: HookContext | Mapping[str, Any]) -> RotationResult | None:
    """Rotate the release file before the release is committed.

    The Unreleased entries move into a new '# v<version> – <date>' section and
    the Unreleased heading is left empty. Write failures are not caught.

    Returns:
        The rotation result, or None when no version is available.
    """
    ctx = _validate_context("prepare", HookContext, context)
    log = ctx.logger or logger

    version = ctx.next_release.version if ctx.next_release else None
    if not version:
        log.info("No next release version available in prepare; skipping rotation")
        return None

    tag = format_tag(version, config.tag_format)
    release_date = ctx.date.isoformat() if ctx.date else today_iso()

    content = read_file_safe(config.release_file, log)
    if VersionDetector().is_version_documented(content, version):
        log.warning("Version already has a section in the release file", version=tag)

    result = rotate(content, tag, release_date)
    if not result.changed:
        log.info("No Unreleased entries to rotate; skipping release file update")
        return result

    write_file(config.release_file, result.result)
    log.info("Rotated release file", path=str(config.release_file), version=tag, date=release_date)
    return result


def generate_notes(config: HookConfig, context: NotesContext | MutableMapping[str, Any]) -> NotesContext | MutableMapping[str, Any]:
    """Prepend the Unreleased entries to the notes generated by the release pipeline.

    The context is updated in place and returned. The release file is only read.
    """
    ctx = _validate_context("generate_notes", NotesContext, context)
    content = read_file_safe(config.release_file)
    notes = merge_release_notes(content, ctx.notes)

    if notes == (ctx.notes or ""):
        return context

    logger.debug("Merged Unreleased entries into release notes", length=len(notes))
    if isinstance(context, NotesContext):
        context.notes = notes
    else:
        context["notes"] = notes
    return context
