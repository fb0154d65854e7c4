"""Merge the Unreleased section into generated release notes."""

from .extractor import extract_unreleased


def merge_release_notes(document: str, notes: str | None) -> str:
    """Prepend the Unreleased body to the notes produced by the release pipeline.

    When the Unreleased section is missing or empty the notes are returned as-is.
    """
    unreleased = extract_unreleased(document)
    if not unreleased:
        return notes or ""
    return f"{unreleased}\n\n{notes or ''}".strip()
