from fixforge.utils.diff import unified_diff


def test_unified_diff_uses_git_style_headers():
    out = unified_diff("a\ncd $1\nb\n", 'a\ncd "$1"\nb\n', path="x.sh")
    assert out.splitlines() == [
        "--- a/x.sh",
        "+++ b/x.sh",
        "@@ -1,3 +1,3 @@",
        " a",
        "-cd $1",
        '+cd "$1"',
        " b",
    ]


def test_unified_diff_marks_missing_final_newline():
    out = unified_diff("cd $1", "cd $1 || exit", path="x.sh")
    assert "-cd $1\n\\ No newline at end of file\n" in out
    assert out.endswith("+cd $1 || exit\n\\ No newline at end of file\n")


def test_unified_diff_empty_when_unchanged():
    assert unified_diff("same\n", "same\n") == ""


def test_unified_diff_context_size():
    original = "".join(f"l{i}\n" for i in range(10))
    patched = original.replace("l5\n", "L5\n")
    out = unified_diff(original, patched, context=1)
    assert "@@ -5,3 +5,3 @@" in out
