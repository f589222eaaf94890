from .documents import STDIN_FILE, extract_fixes, group_fixes_by_file
from .records import parse_fix, parse_replacement

__all__ = [
    "extract_fixes",
    "group_fixes_by_file",
    "parse_fix",
    "parse_replacement",
    "STDIN_FILE",
]
