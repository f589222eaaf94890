# fixforge/core.py
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Tuple

from ._logging import resolve_logger
from .commit import Change, CommitSummary, commit_changes, resolve_within
from .errors import CommitError, PathViolation
from .extract import STDIN_FILE, extract_fixes, group_fixes_by_file
from .fixer import AutoFixer
from .utils.gitignore import get_gitignore, is_ignored
from .utils.lines import TAB_STOP


@dataclass
class FileFixResult:
    """What happened to one file named in a tool report."""

    path: str
    applied: List[Any] = field(default_factory=list)
    rejected: List[Any] = field(default_factory=list)
    original_content: Optional[str] = None
    new_content: Optional[str] = None
    # Set when the file was not processed at all (stdin, ignored, unreadable...)
    skipped: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.new_content is not None and self.new_content != self.original_content


def apply_fixes_to_text(text: str, fixes: Iterable[Any], *, tab_stop: int = TAB_STOP) -> str:
    """Apply every non-conflicting fix to `text` and return the patched text."""
    fixer = AutoFixer(text, tab_stop=tab_stop)
    fixer.apply_fixes(fixes)
    return fixer.get_result()


def _relative_to_base(base_real: str, path: str) -> str:
    if os.path.isabs(path):
        path = os.path.relpath(path, base_real)
    return path.replace(os.sep, "/")


def fix_files(
    document: Any,
    base_path: str,
    *,
    respect_gitignore: bool = True,
    tab_stop: int = TAB_STOP,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> List[FileFixResult]:
    """
    Apply a tool report to the files it mentions, in memory.

    `document` is anything `extract_fixes` accepts (JSON text, a ``json1``
    object or a list of records). Each file gets its own fixer session; files
    are read relative to `base_path` and nothing is written.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    base_real = os.path.realpath(base_path)
    spec = get_gitignore(base_real) if respect_gitignore else None

    results: List[FileFixResult] = []
    for path, records in group_fixes_by_file(extract_fixes(document)).items():
        result = FileFixResult(path=path)
        results.append(result)

        if path == STDIN_FILE:
            result.skipped = "stdin"
            result.rejected = list(records)
            lg.info("Skipping %d fix(es) reported for stdin", len(records))
            continue

        rel = _relative_to_base(base_real, path)
        try:
            target = resolve_within(base_real, rel)
        except PathViolation as e:
            result.skipped = str(e)
            result.rejected = list(records)
            lg.warning("Skipping %s: %s", path, e)
            continue
        if spec is not None and is_ignored(spec, rel):
            result.skipped = "ignored"
            result.rejected = list(records)
            lg.info("Skipping ignored file %s", path)
            continue

        try:
            with open(target, "r", encoding="utf-8", newline="") as f:
                original = f.read()
        except (OSError, UnicodeDecodeError) as e:
            result.skipped = f"unreadable: {e}"
            result.rejected = list(records)
            lg.warning("Could not read %s: %s", path, e)
            continue

        fixer = AutoFixer(original, tab_stop=tab_stop, logger=logger, log=log)
        report = fixer.apply_fixes(records)
        result.path = rel
        result.applied = report.applied
        result.rejected = report.rejected
        result.original_content = original
        result.new_content = fixer.get_result()
        lg.info("%s: %d applied, %d rejected", rel, len(report.applied), len(report.rejected))
    return results


def changes_from_results(results: Iterable[FileFixResult]) -> List[Change]:
    return [
        Change(path=r.path, new_content=r.new_content, original_content=r.original_content)
        for r in results
        if r.changed
    ]


def fix_and_commit(
    document: Any,
    base_path: str,
    *,
    mode: str = "best_effort",
    atomic: bool = False,
    dry_run: bool = False,
    backup_ext: Optional[str] = None,
    strict: bool = False,
    respect_gitignore: bool = True,
    tab_stop: int = TAB_STOP,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> Tuple[List[FileFixResult], CommitSummary]:
    """
    `fix_files` followed by `commit_changes` for every file that changed.

    With `strict=True` a CommitError (carrying the summary) is raised when
    any file could not be written.
    """
    results = fix_files(
        document,
        base_path,
        respect_gitignore=respect_gitignore,
        tab_stop=tab_stop,
        logger=logger,
        log=log,
    )
    summary = commit_changes(
        base_path,
        changes_from_results(results),
        mode=mode,
        atomic=atomic,
        dry_run=dry_run,
        backup_ext=backup_ext,
    )
    if strict and summary.failed:
        raise CommitError(f"Failed to write {', '.join(summary.failed)}", summary)
    return results, summary
