from .apply import apply_candidates, splice_order
from .candidates import Admission, build_candidates, find_conflict, try_accept_fix
from .session import AutoFixer, FixReport
from .shift import ShiftTracker

__all__ = [
    "AutoFixer",
    "FixReport",
    "ShiftTracker",
    "Admission",
    "build_candidates",
    "find_conflict",
    "try_accept_fix",
    "apply_candidates",
    "splice_order",
]
