"""Git integration for dating and attributing documents from history."""

from .history import GitRepo, WalkSummary, walk_history

__all__ = [
    "GitRepo",
    "WalkSummary",
    "walk_history",
]
