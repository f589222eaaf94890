from .fix import AFTER_END, BEFORE_START, INSERTION_POINTS, Candidate, Fix, Replacement

__all__ = [
    "Replacement",
    "Fix",
    "Candidate",
    "BEFORE_START",
    "AFTER_END",
    "INSERTION_POINTS",
]
