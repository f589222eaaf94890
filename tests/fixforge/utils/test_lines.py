import pytest

from fixforge.utils.lines import LineIndex, build_line_offsets, translate_column


def test_build_line_offsets_includes_trailing_sentinel():
    lines = "foo\ncd foo\nbar\n".split("\n")
    assert build_line_offsets(lines) == [0, 4, 11, 15, 16]


def test_build_line_offsets_single_line_without_newline():
    assert build_line_offsets(["cd $1"]) == [0, 6]


def test_translate_column_is_identity_without_tabs():
    line = "cd $1"
    for col in range(1, len(line) + 2):
        assert translate_column(line, col) == col


def test_translate_column_past_end_clamps_to_end_of_line():
    assert translate_column("cd $1", 99) == 6
    assert translate_column("", 3) == 1


def test_translate_column_with_leading_tabs():
    line = "\t\techo $var:\t$value"
    assert translate_column(line, 22) == 8   # '$var'
    assert translate_column(line, 26) == 12  # ':'
    assert translate_column(line, 33) == 14  # '$value'
    assert translate_column(line, 39) == 20  # end of line


def test_translate_column_inside_a_tab_maps_to_the_tab():
    assert translate_column("\tx", 3) == 1
    assert translate_column("\tx", 8) == 1
    assert translate_column("\tx", 9) == 2


def test_translate_column_tab_after_text_advances_to_next_stop():
    # 'ab' occupies 1-2, the tab runs to 8, 'c' is logical column 9
    assert translate_column("ab\tc", 9) == 4


def test_translate_column_custom_tab_stop():
    assert translate_column("\tx", 5, tab_stop=4) == 2


def test_line_index_resolve_offset():
    index = LineIndex("\t\tfoo bar\n\t\techo $var:\t$value")
    assert index.resolve_offset(2, 22) == 17
    assert index.text[17] == "$"
    assert index.resolve_offset(2, 39) == len(index.text)


def test_line_index_line_bounds():
    index = LineIndex("foo\ncd foo\nbar\n")
    assert len(index) == 4
    assert index.line_start(2) == 4
    assert index.line_end(2) == 11
    assert index.text[index.line_start(2):index.line_end(2)] == "cd foo\n"


@pytest.mark.parametrize("line", [0, 3, -1])
def test_line_index_rejects_lines_outside_text(line):
    index = LineIndex("one\ntwo")
    with pytest.raises(ValueError):
        index.resolve_offset(line, 1)
