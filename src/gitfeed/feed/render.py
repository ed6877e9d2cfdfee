"""Markdown to HTML rendering for document bodies."""

from __future__ import annotations

from pathlib import Path

import markdown

from ..errors import ContentError

MARKDOWN_EXTENSIONS = [
    "tables",
    "footnotes",
    "fenced_code",
    "sane_lists",
    "pymdownx.tilde",
    "pymdownx.tasklist",
]


def read_document(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ContentError(f"Cannot read document {path}: {exc}") from exc


def render_markdown(text: str) -> str:
    """Render ``text`` to an HTML fragment.

    A fresh converter is used per call; footnote numbering is kept per
    converter and must not leak between documents.
    """

    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS, output_format="html")
