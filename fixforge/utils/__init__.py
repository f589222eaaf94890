# fixforge/utils/__init__.py
from .diff import unified_diff
from .gitignore import get_gitignore, is_ignored
from .lines import TAB_STOP, LineIndex, build_line_offsets, translate_column

__all__ = [
    "LineIndex",
    "build_line_offsets",
    "translate_column",
    "TAB_STOP",
    "unified_diff",
    "get_gitignore",
    "is_ignored",
]
