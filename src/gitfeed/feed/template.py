"""Render feeds through a user-editable Jinja2 template.

The template owns the feed-level metadata and layout. It receives
``updated``, ``gfversion`` and ``entries``; each entry exposes ``id``,
``title``, ``updated``, ``published``, ``author.name``, ``author.email``,
``content`` and ``link``. Timestamps are RFC 3339 strings and every value is
XML-escaped on output.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, TemplateNotFound

from ..errors import ConfigError, ContentError
from .atom import FeedEntry


def template_context(
    entries: Iterable[FeedEntry],
    *,
    updated: datetime,
    generator_version: str,
) -> Dict[str, Any]:
    return {
        "updated": updated.isoformat(),
        "gfversion": generator_version,
        "entries": [
            {
                "id": entry.id,
                "title": entry.title,
                "updated": entry.updated.isoformat(),
                "published": entry.published.isoformat(),
                "author": {"name": entry.author_name, "email": entry.author_email},
                "content": entry.content,
                "link": entry.link,
            }
            for entry in entries
        ],
    }


def render_template(
    path: Path,
    entries: Iterable[FeedEntry],
    *,
    updated: datetime,
    generator_version: str,
) -> str:
    """Render the template at ``path`` with the feed context."""

    environment = Environment(
        loader=FileSystemLoader(str(path.parent)),
        autoescape=True,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    context = template_context(entries, updated=updated, generator_version=generator_version)
    try:
        template = environment.get_template(path.name)
    except TemplateNotFound as exc:
        raise ContentError(f"Cannot read feed template {path}") from exc
    except TemplateError as exc:
        raise ConfigError(f"Invalid feed template {path}: {exc}") from exc
    try:
        return template.render(**context)
    except TemplateError as exc:
        raise ConfigError(f"Cannot render feed template {path}: {exc}") from exc
