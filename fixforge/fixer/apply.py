# fixforge/fixer/apply.py
from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ..errors.fix import MalformedFixError
from ..models.fix import AFTER_END, BEFORE_START, Candidate
from .shift import ShiftTracker

__all__ = ["splice_order", "apply_candidate", "apply_candidates"]


def splice_order(candidates: Iterable[Candidate]) -> List[Candidate]:
    """Highest precedence first; equal precedence keeps admission order."""
    return sorted(candidates, key=lambda c: (-c.precedence, c.seq))


def _anchor(cand: Candidate) -> int:
    if cand.insertion_point == BEFORE_START:
        return cand.start
    if cand.insertion_point == AFTER_END:
        return cand.end + 1
    raise MalformedFixError(
        f"Unrecognized insertion point {cand.insertion_point!r}", replacement=cand
    )


def apply_candidate(text: str, tracker: ShiftTracker, cand: Candidate) -> str:
    """
    Splice one candidate into the working text and record its length delta.

    `cand.start`/`cand.end` refer to the original text; the tracker maps them
    onto `text`, which already contains every previously applied candidate.
    """
    point = _anchor(cand)
    frm = tracker.translate(cand.start)
    to = tracker.translate(cand.end)
    text = text[:frm] + cand.text + text[to:]
    tracker.insert(point, len(cand.text) - (to - frm))
    return text


def apply_candidates(
    original: str, candidates: Iterable[Candidate], tracker: Optional[ShiftTracker] = None
) -> Tuple[str, ShiftTracker]:
    """
    Apply accepted candidates onto `original` in splice order.

    Returns the patched text and the tracker holding every applied delta, so
    callers can map further original offsets (e.g. line ends) into the result.
    """
    if tracker is None:
        tracker = ShiftTracker()
    else:
        tracker.reset()
    text = original
    for cand in splice_order(candidates):
        text = apply_candidate(text, tracker, cand)
    return text, tracker
