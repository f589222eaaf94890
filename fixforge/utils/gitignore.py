# fixforge/utils/gitignore.py
import os
import pathspec
from typing import List

def get_gitignore(path: str) -> pathspec.PathSpec:
    """
    Return a PathSpec compiled from the nearest .gitignore found by walking
    upward from `path` (file or directory). '.git/' is always ignored, so
    files inside a repository's metadata directory are never patched.
    """
    lines: List[str] = [".git/"]

    base = os.path.abspath(path or ".")
    if os.path.isfile(base):
        base = os.path.dirname(base)

    cur = base
    while True:
        gi = os.path.join(cur, ".gitignore")
        if os.path.isfile(gi):
            try:
                with open(gi, "r", encoding="utf-8", errors="ignore") as f:
                    lines.extend(f.read().splitlines())
                break
            except OSError:
                # Unreadable; keep walking upward
                pass
        parent = os.path.dirname(cur)
        if parent == cur:
            break
        cur = parent

    return pathspec.PathSpec.from_lines("gitwildmatch", lines)


def is_ignored(spec: pathspec.PathSpec, rel_path: str) -> bool:
    """Match a base-relative path, using forward slashes like .gitignore does."""
    return spec.match_file(rel_path.replace(os.sep, "/"))
