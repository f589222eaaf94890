# fixforge/fixer/candidates.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..models.fix import Candidate, Fix, Replacement
from ..utils.lines import LineIndex

__all__ = [
    "Admission",
    "build_candidates",
    "find_conflict",
    "try_accept_fix",
    "REJECT_NO_FIX",
    "REJECT_NO_REPLACEMENTS",
    "REJECT_OUT_OF_RANGE",
    "REJECT_CONFLICT",
]

REJECT_NO_FIX = "no-fix"
REJECT_NO_REPLACEMENTS = "no-replacements"
REJECT_OUT_OF_RANGE = "out-of-range"
REJECT_CONFLICT = "conflict"


@dataclass
class Admission:
    """Outcome of offering one fix to the accepted set."""

    accepted: bool
    candidates: List[Candidate] = field(default_factory=list)
    reason: Optional[str] = None
    # (new candidate, accepted candidate) for REJECT_CONFLICT
    conflict: Optional[Tuple[Candidate, Candidate]] = None


def _to_candidate(rep: Replacement, index: LineIndex, seq: int) -> Candidate:
    return Candidate(
        start=index.resolve_offset(rep.line, rep.column),
        end=index.resolve_offset(rep.end_line, rep.end_column),
        start_line=rep.line,
        end_line=rep.end_line,
        precedence=rep.precedence,
        insertion_point=rep.insertion_point,
        text=rep.replacement,
        seq=seq,
    )


def build_candidates(
    replacements: Sequence[Replacement], index: LineIndex, first_seq: int = 0
) -> List[Candidate]:
    """
    Resolve each replacement to absolute offsets of the original text.
    Raises ValueError if a replacement points at a line the text does not have.
    """
    return [_to_candidate(rep, index, first_seq + i) for i, rep in enumerate(replacements)]


def find_conflict(
    candidates: Sequence[Candidate], accepted: Sequence[Candidate]
) -> Optional[Tuple[Candidate, Candidate]]:
    """
    First (candidate, accepted) pair whose half-open ranges overlap.

    Candidates are only compared with the accepted set, never with each other:
    replacements of one fix are trusted to be consistent.
    """
    # TODO: sort `accepted` by start and bisect once sessions routinely hold thousands of edits.
    for cand in candidates:
        for existing in accepted:
            if cand.overlaps(existing):
                return cand, existing
    return None


def try_accept_fix(
    fix: Optional[Fix], index: LineIndex, accepted: List[Candidate], first_seq: int = 0
) -> Admission:
    """
    Offer a fix to the accepted set. Either every candidate of the fix is
    appended to `accepted` (in the given order) or nothing is.
    """
    if fix is None:
        return Admission(False, reason=REJECT_NO_FIX)
    if not fix.applicable:
        return Admission(False, reason=REJECT_NO_REPLACEMENTS)

    try:
        candidates = build_candidates(fix.replacements, index, first_seq)
    except ValueError:
        return Admission(False, reason=REJECT_OUT_OF_RANGE)

    clash = find_conflict(candidates, accepted)
    if clash is not None:
        return Admission(False, candidates=candidates, reason=REJECT_CONFLICT, conflict=clash)

    accepted.extend(candidates)
    return Admission(True, candidates=candidates)
