"""End-to-end feed generation: scan, walk history, select, render."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from . import __version__
from .config import FeedConfig
from .documents import build_registry, scan_content_dir, select_top_n
from .errors import DocumentDataError
from .feed import (
    FeedEntry,
    build_entry,
    read_document,
    render_feed,
    render_markdown,
    render_template,
)
from .git import GitRepo, walk_history

LOGGER = logging.getLogger(__name__)


def generate_feed(config: FeedConfig, *, now: Optional[datetime] = None) -> str:
    """Build the feed described by ``config``.

    Parameters
    ----------
    config:
        Validated run configuration.
    now:
        Feed-level ``updated`` time. Defaults to the current UTC time.

    Returns
    -------
    The serialised feed. Any failure raises a :class:`~gitfeed.errors.GitFeedError`
    and nothing is returned.
    """

    repo = GitRepo(config.repo_path)
    root = repo.working_dir
    paths = scan_content_dir(root, config.content_dir, config.extensions)
    registry = build_registry(paths)

    walk_history(repo, registry, config.rev)

    if len(registry) and not registry.touched():
        raise DocumentDataError(
            f"None of the {len(registry)} documents in {config.content_dir} "
            f"has a single-parent commit reachable from {config.rev}"
        )
    if not len(registry):
        LOGGER.warning("No documents found in %s", root / config.content_dir)
    pending = registry.pending()
    if pending:
        LOGGER.warning(
            "Leaving out %d documents without qualifying history: %s",
            len(pending),
            ", ".join(record.path for record in pending),
        )

    entries: List[FeedEntry] = []
    for record in select_top_n(registry, config.limit):
        blob_id = repo.blob_id(record.path, config.rev)
        body = render_markdown(read_document(root / record.path))
        entries.append(
            build_entry(record, blob_id=blob_id, content_html=body, link_prefix=config.link_prefix)
        )

    updated = now or datetime.now(timezone.utc)
    if config.template is not None:
        return render_template(
            config.template, entries, updated=updated, generator_version=__version__
        )
    return render_feed(
        entries,
        title=config.feed_title,
        feed_id=config.resolved_feed_id,
        updated=updated,
        generator_version=__version__,
        link=config.feed_link,
    )
