from .commit import Change, CommitSummary, commit_changes
from .core import FileFixResult, apply_fixes_to_text, changes_from_results, fix_and_commit, fix_files
from .errors import (
    CommitError,
    ExtractError,
    MalformedFixError,
    NothingToRenderError,
    PathViolation,
)
from .extract import extract_fixes, group_fixes_by_file, parse_fix
from .fixer import AutoFixer, FixReport, ShiftTracker
from .models import AFTER_END, BEFORE_START, Candidate, Fix, Replacement
from .utils import LineIndex, translate_column, unified_diff

__all__ = [
    "AutoFixer",
    "FixReport",
    "ShiftTracker",
    "LineIndex",
    "translate_column",
    "unified_diff",
    "Fix",
    "Replacement",
    "Candidate",
    "BEFORE_START",
    "AFTER_END",
    "parse_fix",
    "extract_fixes",
    "group_fixes_by_file",
    "apply_fixes_to_text",
    "fix_files",
    "fix_and_commit",
    "changes_from_results",
    "FileFixResult",
    "commit_changes",
    "Change",
    "CommitSummary",
    "MalformedFixError",
    "NothingToRenderError",
    "ExtractError",
    "CommitError",
    "PathViolation",
]
