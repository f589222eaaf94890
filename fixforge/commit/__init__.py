from .core import Change, CommitSummary, commit_changes, resolve_within

__all__ = ["commit_changes", "Change", "CommitSummary", "resolve_within"]
