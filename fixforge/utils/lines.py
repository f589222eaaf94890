# fixforge/utils/lines.py
from typing import List

# ShellCheck reports columns with standard 8 column tab stops.
TAB_STOP = 8


def build_line_offsets(lines: List[str]) -> List[int]:
    """
    Compute the character offset of the start of each line.

    The table has one extra trailing entry: the offset just past the last
    line's newline, so ``text[offsets[a-1]:offsets[b]]`` is lines a..b with
    their newlines.
    """
    total = 0
    offsets: List[int] = []
    for ln in lines:
        offsets.append(total)
        total += len(ln) + 1
    offsets.append(total)
    return offsets


def translate_column(line: str, logical_col: int, tab_stop: int = TAB_STOP) -> int:
    """
    Convert a tab-stop aware 1-based column into a 1-based character column,
    where a tab counts as a single character.

    Columns past the logical end of the line map to the physical end of line.
    """
    logical = 0
    for i, ch in enumerate(line):
        if ch == "\t":
            logical += tab_stop - (logical % tab_stop)
        else:
            logical += 1
        if logical_col <= logical:
            return i + 1
    return len(line) + 1


class LineIndex:
    """Line table for one immutable source text."""

    def __init__(self, text: str, tab_stop: int = TAB_STOP):
        self.text = text
        self.tab_stop = tab_stop
        self.lines = text.split("\n")
        self.offsets = build_line_offsets(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def line_start(self, line: int) -> int:
        return self.offsets[line - 1]

    def line_end(self, line: int) -> int:
        """Offset just past the newline terminating `line`."""
        return self.offsets[line]

    def resolve_offset(self, line: int, column: int) -> int:
        """0-based offset into the original text for a 1-based logical position."""
        if not 1 <= line <= len(self.lines):
            raise ValueError(f"line {line} is outside 1..{len(self.lines)}")
        physical = translate_column(self.lines[line - 1], column, self.tab_stop)
        return self.offsets[line - 1] + physical - 1
