"""Discover the documents under the content directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from ..errors import ContentError

LOGGER = logging.getLogger(__name__)

DOCUMENT_EXTENSIONS = (".md", ".markdown")


def scan_content_dir(
    repo_root: Path,
    content_dir: str,
    extensions: Iterable[str] = DOCUMENT_EXTENSIONS,
) -> List[str]:
    """List the documents directly inside ``content_dir``.

    Parameters
    ----------
    repo_root:
        Working tree root; returned paths are relative to it.
    content_dir:
        Directory to scan, relative to ``repo_root``. Not recursive.
    extensions:
        Accepted file suffixes, compared case-insensitively.

    Returns
    -------
    Sorted repository-relative POSIX paths, matching the paths git reports
    in tree diffs.
    """

    suffixes = {suffix.lower() for suffix in extensions}
    root = repo_root.resolve()
    directory = root / content_dir
    try:
        candidates = list(directory.iterdir())
    except OSError as exc:
        raise ContentError(f"Cannot list content directory {directory}: {exc}") from exc

    paths: List[str] = []
    for candidate in candidates:
        if candidate.name.startswith("."):
            continue
        if not candidate.is_file() or candidate.suffix.lower() not in suffixes:
            continue
        paths.append(candidate.relative_to(root).as_posix())

    paths.sort()
    LOGGER.debug("Found %d documents in %s", len(paths), directory)
    return paths
