from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

BEFORE_START = "beforeStart"
AFTER_END = "afterEnd"
INSERTION_POINTS = (BEFORE_START, AFTER_END)


@dataclass(frozen=True)
class Replacement:
    """One proposed edit in logical (tab-stop aware), 1-based coordinates."""

    line: int
    column: int
    end_line: int
    end_column: int
    precedence: int
    insertion_point: str
    replacement: str


@dataclass(frozen=True)
class Fix:
    """
    A diagnostic plus its optional replacement bundle.

    ``replacements`` is None when the record carried no bundle at all; such a
    fix is never applicable. An empty tuple is a valid (no-op) bundle.
    ``source`` keeps the caller's original object so reports can hand it back.
    """

    replacements: Optional[Tuple[Replacement, ...]]
    code: Optional[int] = None
    level: Optional[str] = None
    message: Optional[str] = None
    file: Optional[str] = None
    source: Any = field(default=None, compare=False, repr=False)

    @property
    def applicable(self) -> bool:
        return self.replacements is not None


@dataclass(frozen=True)
class Candidate:
    """A replacement resolved to a half-open [start, end) range of the original text."""

    start: int
    end: int
    start_line: int
    end_line: int
    precedence: int
    insertion_point: str
    text: str
    seq: int = 0  # admission order, used as the stable tie-break

    def overlaps(self, other: Candidate) -> bool:
        return self.end > other.start and other.end > self.start
