from fixforge.utils.gitignore import get_gitignore, is_ignored


def test_gitignore_patterns_are_applied(tmp_path):
    (tmp_path / ".gitignore").write_text("build/\n*.log\n")
    spec = get_gitignore(str(tmp_path))
    assert is_ignored(spec, "build/run.sh")
    assert is_ignored(spec, "debug.log")
    assert not is_ignored(spec, "src/run.sh")


def test_git_directory_always_ignored(tmp_path):
    spec = get_gitignore(str(tmp_path / "missing"))
    assert is_ignored(spec, ".git/hooks/pre-commit")
    assert not is_ignored(spec, "run.sh")


def test_gitignore_found_from_subdirectory(tmp_path):
    (tmp_path / ".gitignore").write_text("vendor/\n")
    sub = tmp_path / "pkg"
    sub.mkdir()
    spec = get_gitignore(str(sub))
    assert is_ignored(spec, "vendor/lib.sh")
