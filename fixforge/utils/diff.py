import difflib

_NO_EOL = "\n\\ No newline at end of file\n"


def unified_diff(original: str, patched: str, path: str = "-", context: int = 3) -> str:
    """
    Render a git-style unified diff (``a/`` and ``b/`` prefixes) between two
    versions of one file. Returns an empty string when nothing changed.
    """
    a = original.splitlines(keepends=True)
    b = patched.splitlines(keepends=True)
    out = []
    for ln in difflib.unified_diff(a, b, fromfile=f"a/{path}", tofile=f"b/{path}", n=context):
        out.append(ln)
        if not ln.endswith("\n"):
            out.append(_NO_EOL)
    return "".join(out)
