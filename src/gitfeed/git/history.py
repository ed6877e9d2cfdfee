"""Replay commit history to date and attribute tracked documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional

from git import Commit, GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo
from git.exc import BadName

from ..documents.registry import DocumentRegistry
from ..errors import DocumentDataError, RepositoryError

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class WalkSummary:
    """Counters describing one history walk."""

    commits: int = 0
    root_commits: int = 0
    merge_commits: int = 0
    applied: int = 0
    touches: int = 0


def _optional(value: Optional[str]) -> Optional[str]:
    return value or None


class GitRepo:
    """Wrapper around gitpython for reading repository history."""

    def __init__(self, repo_path: Path):
        self.repo_path = Path(repo_path).resolve()
        try:
            self.repo = Repo(self.repo_path)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise RepositoryError(f"Not a valid git repository: {repo_path}") from e

    @property
    def working_dir(self) -> Path:
        if self.repo.working_tree_dir is None:
            raise RepositoryError(f"Repository has no working tree: {self.repo_path}")
        return Path(self.repo.working_tree_dir)

    def resolve(self, rev: str = "HEAD") -> Commit:
        try:
            return self.repo.commit(rev)
        except (BadName, ValueError, GitCommandError) as e:
            raise RepositoryError(f"Cannot resolve {rev!r}: {e}") from e

    def has_history(self, rev: str = "HEAD") -> bool:
        """Return whether any commit is reachable from ``rev``.

        Only an unborn ``HEAD``, as in a freshly initialised repository, has
        no history. Any other revision that does not resolve raises
        :class:`RepositoryError`.
        """

        if rev == "HEAD" and not self.repo.head.is_valid():
            return False
        self.resolve(rev)
        return True

    def iter_commits_chronological(self, rev: str = "HEAD") -> Iterator[Commit]:
        """Yield every commit reachable from ``rev``, oldest first.

        Commits are ordered by commit time; a parent always precedes its
        children, which settles commits sharing a timestamp.
        """

        try:
            yield from self.repo.iter_commits(rev, date_order=True, reverse=True)
        except (GitCommandError, ValueError) as e:
            raise RepositoryError(f"Cannot walk history from {rev!r}: {e}") from e

    def changed_paths(self, commit: Commit) -> List[str]:
        """Return the paths a single-parent commit changed, new side first.

        Renames are reported under their new name and deletions under the
        path that was removed.
        """

        if len(commit.parents) != 1:
            raise ValueError(f"Commit {commit.hexsha} does not have exactly one parent")
        try:
            diffs = commit.parents[0].diff(commit)
        except GitCommandError as e:
            raise RepositoryError(f"Cannot diff commit {commit.hexsha}: {e}") from e
        return [diff.b_path or diff.a_path for diff in diffs]

    def blob_id(self, path: str, rev: str = "HEAD") -> str:
        """Return the hex id of the blob stored at ``path`` in ``rev``'s tree."""

        tree = self.resolve(rev).tree
        try:
            return (tree / path).hexsha
        except KeyError as e:
            raise DocumentDataError(f"{path} is not committed in {rev}") from e


def walk_history(repo: GitRepo, registry: DocumentRegistry, rev: str = "HEAD") -> WalkSummary:
    """Record first and latest touches for every registered document.

    Parameters
    ----------
    repo:
        Repository to replay.
    registry:
        Records to update in place. Paths git reports that are not
        registered are ignored.
    rev:
        Reference whose full ancestry is walked.

    Returns
    -------
    A :class:`WalkSummary` of what was visited.

    Only single-parent commits are diffed. The root commit has nothing to
    diff against and merge commits are not attributed, so a document whose
    changes only ever arrived through either stays pending.
    """

    summary = WalkSummary()
    if not repo.has_history(rev):
        LOGGER.warning("No history reachable from %s in %s", rev, repo.repo_path)
        return summary

    for commit in repo.iter_commits_chronological(rev):
        summary.commits += 1
        parent_count = len(commit.parents)
        if parent_count == 0:
            summary.root_commits += 1
            continue
        if parent_count > 1:
            summary.merge_commits += 1
            LOGGER.debug("Skipping merge commit %s", commit.hexsha[:8])
            continue

        summary.applied += 1
        timestamp = commit.committed_datetime
        author = commit.author
        for path in repo.changed_paths(commit):
            record = registry.lookup(path)
            if record is None:
                continue
            record.touch(timestamp, _optional(author.name), _optional(author.email))
            summary.touches += 1

    LOGGER.info(
        "Walked %d commits (%d diffed, %d merges skipped), %d document touches",
        summary.commits,
        summary.applied,
        summary.merge_commits,
        summary.touches,
    )
    return summary
