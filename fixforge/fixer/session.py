# fixforge/fixer/session.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Tuple

from .._logging import resolve_logger
from ..errors.fix import NothingToRenderError
from ..extract.records import parse_fix
from ..models.fix import Candidate
from ..utils.diff import unified_diff
from ..utils.lines import TAB_STOP, LineIndex
from .apply import apply_candidates
from .candidates import try_accept_fix

__all__ = ["AutoFixer", "FixReport"]


@dataclass
class FixReport:
    """Partition of submitted fixes; holds the caller's original objects."""

    applied: List[Any] = field(default_factory=list)
    rejected: List[Any] = field(default_factory=list)


class AutoFixer:
    """
    Collects fixes for one source text and renders the patched result.

    Fixes are checked for range conflicts when they are submitted; the text
    itself is only patched when a result is rendered, from the original text
    every time, so rendering can be repeated freely.

    Not safe for concurrent mutation: serialise apply_fix/apply_fixes/reset.
    """

    def __init__(
        self,
        text: str,
        *,
        tab_stop: int = TAB_STOP,
        logger: logging.Logger | None = None,
        log: bool = False,
    ):
        self._index = LineIndex(text, tab_stop)
        self._accepted: List[Candidate] = []
        self._seq = 0
        self._log = resolve_logger(logger=logger, enabled=log, name=__name__)

    @property
    def source(self) -> str:
        return self._index.text

    @property
    def replacements(self) -> Tuple[Candidate, ...]:
        return tuple(self._accepted)

    def apply_fix(self, item: Any) -> bool:
        """Try to apply one fix. True if it was accepted without conflicting with earlier ones."""
        fix = parse_fix(item)
        admission = try_accept_fix(fix, self._index, self._accepted, self._seq)
        if not admission.accepted:
            code = getattr(fix, "code", None)
            if admission.conflict is not None:
                new, old = admission.conflict
                self._log.info(
                    "Rejected fix (code %s): [%d, %d) overlaps accepted [%d, %d)",
                    code, new.start, new.end, old.start, old.end,
                )
            else:
                self._log.info("Rejected fix (code %s): %s", code, admission.reason)
            return False
        self._seq += len(admission.candidates)
        self._log.debug("Accepted fix with %d replacement(s)", len(admission.candidates))
        return True

    def apply_fixes(self, items: Iterable[Any]) -> FixReport:
        """Apply fixes in order; earlier acceptances can cause later fixes to be rejected."""
        report = FixReport()
        for item in items:
            if self.apply_fix(item):
                report.applied.append(item)
            else:
                report.rejected.append(item)
        self._log.info(
            "Applied %d fix(es), rejected %d", len(report.applied), len(report.rejected)
        )
        return report

    def get_result(self) -> str:
        """The whole text with every accepted fix applied."""
        text, _tracker = apply_candidates(self._index.text, self._accepted)
        return text

    def get_snippet(self) -> str:
        """
        Only the lines from the first to the last line touched by an accepted
        fix, including the last line's newline.
        """
        if not self._accepted:
            raise NothingToRenderError("No fixes have been applied.")

        text, tracker = apply_candidates(self._index.text, self._accepted)
        min_line = min(c.start_line for c in self._accepted)
        max_line = max(c.end_line for c in self._accepted)

        # Every edit is at or after the first touched line, so its start never moves.
        start = self._index.line_start(min_line)
        end = tracker.translate(self._index.line_end(max_line))
        return text[start:end]

    def get_diff(self, path: str = "-", context: int = 3) -> str:
        """Unified diff from the original text to the patched result."""
        return unified_diff(self._index.text, self.get_result(), path, context)

    def has_modifications(self) -> bool:
        return len(self._accepted) > 0

    def reset(self) -> None:
        """Forget all accepted fixes. The original text is kept."""
        self._accepted = []
        self._seq = 0
