"""Release file parsing, classification and rotation."""

from .classifier import classify, classify_unreleased
from .detector import VersionDetector
from .extractor import extract_unreleased, find_unreleased_section, has_meaningful_content
from .models import BumpLevel, ContextLogger, HookContext, LogMethodAdapter, NextRelease, NotesContext, RotationResult
from .notes import merge_release_notes
from .rotator import build_unreleased_header, build_version_header, rotate

__all__ = [
    "BumpLevel",
    "ContextLogger",
    "HookContext",
    "LogMethodAdapter",
    "NextRelease",
    "NotesContext",
    "RotationResult",
    "VersionDetector",
    "build_unreleased_header",
    "build_version_header",
    "classify",
    "classify_unreleased",
    "extract_unreleased",
    "find_unreleased_section",
    "has_meaningful_content",
    "merge_release_notes",
    "rotate",
]
