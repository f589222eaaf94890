# fixforge/commit/core.py
import contextlib
import logging
import os
import shutil
import tempfile
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..errors.path import PathViolation


log = logging.getLogger(__name__)


@dataclass
class Change:
    """New content for one existing file, relative to the commit base path."""
    path: str
    new_content: str
    original_content: Optional[str] = None


@dataclass
class CommitSummary:
    """Outcome of a commit operation."""

    success: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    dry_run: bool = False
    # Map relative path -> error string (when failed)
    errors: Dict[str, str] = field(default_factory=dict)


def resolve_within(base_real: str, rel_path: str) -> str:
    """
    Join `rel_path` onto `base_real` and resolve symlinks, refusing anything
    that ends up outside the base directory.
    """
    resolved = os.path.realpath(os.path.join(base_real, *rel_path.split("/")))
    if os.path.commonpath([base_real, resolved]) != base_real:
        raise PathViolation(f"Path traversal attempt detected for '{rel_path}'")
    return resolved


def _backup_path(dest: str, backup_ext: str) -> str:
    ext = backup_ext if backup_ext.startswith(".") else "." + backup_ext
    return dest + ext


def _record_failure(summary: CommitSummary, ch: Change, exc: Exception) -> None:
    summary.failed.append(ch.path)
    summary.errors[ch.path] = str(exc)
    log.warning("Could not write %s: %s", ch.path, exc)


def _read(path: str) -> str:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _write(path: str, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def commit_changes(
    base_path: str,
    changes: List[Change],
    *,
    mode: str = "best_effort",
    atomic: bool = False,
    dry_run: bool = False,
    backup_ext: Optional[str] = None,
) -> CommitSummary:
    """
    Write patched file contents back to disk.

    Args:
        base_path: Directory every change path is relative to. Paths that
                   resolve outside of it are refused.
        changes: Files to overwrite. Each target must already exist.
        mode: "best_effort" writes what it can and records failures;
              "fail_fast" stops at the first failure.
        atomic: Stage each file in a same-directory tempfile and promote it
                with os.replace(). Combined with "fail_fast", files promoted
                before a failure are restored from their original content.
        dry_run: Validate only; nothing is written.
        backup_ext: Write a copy of each file's previous content next to it,
                    e.g. ".orig".

    Returns:
        CommitSummary listing written and failed paths in input order.
    """
    if mode not in {"best_effort", "fail_fast"}:
        raise ValueError("mode must be one of {'best_effort','fail_fast'}")

    summary = CommitSummary(dry_run=dry_run)
    base_real = os.path.realpath(base_path)

    targets: List[Tuple[Change, str]] = []
    for ch in changes:
        try:
            resolved = resolve_within(base_real, ch.path)
            if not os.path.isfile(resolved):
                raise FileNotFoundError(f"File to modify not found: '{ch.path}'")
            if dry_run and not os.access(resolved, os.W_OK):
                raise PermissionError(f"No write permission for '{ch.path}'")
        except (OSError, PathViolation) as e:
            _record_failure(summary, ch, e)
            if mode == "fail_fast":
                return summary
            continue
        targets.append((ch, resolved))

    if dry_run:
        for ch, _resolved in targets:
            summary.success.append(f"DRY RUN: Would modify file {ch.path} ({len(ch.new_content)} chars)")
        return summary

    if atomic:
        return _commit_atomic(targets, summary, mode, backup_ext)

    # Direct writes. No rollback: a failure leaves earlier files written.
    for ch, resolved in targets:
        try:
            if ch.original_content is None:
                ch.original_content = _read(resolved)
            if backup_ext:
                shutil.copy2(resolved, _backup_path(resolved, backup_ext))
            _write(resolved, ch.new_content)
            summary.success.append(ch.path)
        except OSError as e:
            _record_failure(summary, ch, e)
            if mode == "fail_fast":
                return summary
    return summary


def _commit_atomic(
    targets: List[Tuple[Change, str]],
    summary: CommitSummary,
    mode: str,
    backup_ext: Optional[str],
) -> CommitSummary:
    # Phase 1: stage every file next to its destination.
    staged: Dict[str, str] = {}  # dest -> tmp
    for ch, resolved in targets:
        try:
            if ch.original_content is None:
                ch.original_content = _read(resolved)
            fd, tmp = tempfile.mkstemp(prefix=".ff-", suffix=".tmp", dir=os.path.dirname(resolved))
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(ch.new_content)
            staged[resolved] = tmp
        except OSError as e:
            _record_failure(summary, ch, e)
            if mode == "fail_fast":
                # Nothing promoted yet: drop the staged files, filesystem unchanged.
                for tmp in staged.values():
                    with contextlib.suppress(OSError):
                        os.remove(tmp)
                return summary

    # Phase 2: promote.
    promoted: List[Tuple[str, Change]] = []
    for ch, resolved in targets:
        tmp = staged.get(resolved)
        if tmp is None:
            continue
        try:
            if backup_ext:
                _write(_backup_path(resolved, backup_ext), ch.original_content or "")
            os.replace(tmp, resolved)
            summary.success.append(ch.path)
            promoted.append((resolved, ch))
        except OSError as e:
            _record_failure(summary, ch, e)
            with contextlib.suppress(OSError):
                os.remove(tmp)
            if mode == "fail_fast":
                for pth, pch in reversed(promoted):
                    try:
                        _write(pth, pch.original_content or "")
                    except OSError as rb_err:
                        log.error("Rollback of %s failed: %s", pch.path, rb_err)
                for rest in staged.values():
                    with contextlib.suppress(OSError):
                        if os.path.exists(rest):
                            os.remove(rest)
                summary.success.clear()
                return summary
    return summary
