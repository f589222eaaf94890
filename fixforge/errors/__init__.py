from .commit import CommitError
from .extract import ExtractError
from .fix import MalformedFixError, NothingToRenderError
from .path import PathViolation

__all__ = [
    "MalformedFixError",
    "NothingToRenderError",
    "ExtractError",
    "CommitError",
    "PathViolation",
]
