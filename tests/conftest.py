"""Shared fixtures: throwaway git repositories with controlled commit dates."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional, Sequence

import pytest
from git import Actor, Commit, Repo

ALICE = Actor("Alice", "alice@example.org")
BOB = Actor("Bob", "bob@example.org")

BASE_TIME = 1_600_000_000


def at(offset: int, hours: int = 0) -> datetime:
    """Return the aware datetime a commit made with ``when=offset`` carries."""
    return datetime.fromtimestamp(BASE_TIME + offset, timezone(timedelta(hours=hours)))


class RepoBuilder:
    """Writes files and records commits with explicit authors and dates."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.repo = Repo.init(root)

    def write(self, path: str, text: str = "# Body\n") -> None:
        target = self.root / path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
        self.repo.index.add([path])

    def remove(self, path: str) -> None:
        self.repo.index.remove([path], working_tree=True)

    def commit(
        self,
        message: str,
        *,
        when: int,
        author: Actor = ALICE,
        parents: Optional[Sequence[Commit]] = None,
        head: bool = True,
        tz: str = "+0000",
    ) -> Commit:
        date = f"{BASE_TIME + when} {tz}"
        return self.repo.index.commit(
            message,
            parent_commits=list(parents) if parents is not None else None,
            head=head,
            author=author,
            committer=author,
            author_date=date,
            commit_date=date,
        )

    def blob_id(self, path: str) -> str:
        return (self.repo.head.commit.tree / path).hexsha


@pytest.fixture
def builder(tmp_path: Path) -> RepoBuilder:
    return RepoBuilder(tmp_path / "site")


@pytest.fixture
def blog(builder: RepoBuilder) -> RepoBuilder:
    """Root import, then hello added (C1) and edited (C2), then world added (C3)."""

    builder.write("README.md", "site\n")
    builder.commit("import", when=0)
    builder.write("content/01.hello.md", "# Hello\n\nFirst *draft*.\n")
    builder.commit("add hello", when=100)
    builder.write("content/01.hello.md", "# Hello\n\nFinal *text*.\n")
    builder.commit("edit hello", when=200, author=BOB)
    builder.write("content/02.world.md", "# World\n\n| a | b |\n|---|---|\n| 1 | 2 |\n")
    builder.commit("add world", when=300)
    return builder
