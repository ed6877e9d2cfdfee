"""Atom 1.0 feed assembly."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from ..documents.registry import DocumentRecord, document_slug
from ..errors import DocumentDataError

ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"

ET.register_namespace("", ATOM_NAMESPACE)


def _tag(name: str) -> str:
    return f"{{{ATOM_NAMESPACE}}}{name}"


@dataclass(slots=True)
class FeedEntry:
    """One document prepared for the feed."""

    id: str
    title: str
    link: str
    updated: datetime
    published: datetime
    author_name: str
    author_email: str
    content: str


def build_entry(
    record: DocumentRecord,
    *,
    blob_id: str,
    content_html: str,
    link_prefix: str,
) -> FeedEntry:
    """Combine a touched record with its resolved blob id and rendered body.

    Raises :class:`DocumentDataError` when the record was never touched, its
    last author lacks a name or email, or its file name carries no slug.
    """

    touch = record.last_touch()
    if not touch.author_name:
        raise DocumentDataError(f"Last commit touching {record.path} has no author name")
    if not touch.author_email:
        raise DocumentDataError(f"Last commit touching {record.path} has no author email")

    url = f"{link_prefix}{blob_id}"
    return FeedEntry(
        id=url,
        title=document_slug(record.path),
        link=url,
        updated=touch.timestamp,
        published=record.first_touched,  # set by the same first touch
        author_name=touch.author_name,
        author_email=touch.author_email,
        content=content_html,
    )


def _text(parent: ET.Element, name: str, value: str) -> ET.Element:
    element = ET.SubElement(parent, _tag(name))
    element.text = value
    return element


def render_feed(
    entries: Iterable[FeedEntry],
    *,
    title: str,
    feed_id: str,
    updated: datetime,
    generator_version: str,
    link: Optional[str] = None,
) -> str:
    """Serialise ``entries`` into an Atom document, keeping their order."""

    feed = ET.Element(_tag("feed"))
    _text(feed, "title", title)
    _text(feed, "id", feed_id)
    _text(feed, "updated", updated.isoformat())
    if link:
        ET.SubElement(feed, _tag("link"), {"rel": "alternate", "href": link})
    generator = _text(feed, "generator", "gitfeed")
    generator.set("version", generator_version)

    for entry in entries:
        node = ET.SubElement(feed, _tag("entry"))
        _text(node, "id", entry.id)
        _text(node, "title", entry.title)
        _text(node, "updated", entry.updated.isoformat())
        _text(node, "published", entry.published.isoformat())
        author = ET.SubElement(node, _tag("author"))
        _text(author, "name", entry.author_name)
        _text(author, "email", entry.author_email)
        ET.SubElement(node, _tag("link"), {"rel": "alternate", "href": entry.link})
        content = _text(node, "content", entry.content)
        content.set("type", "html")

    ET.indent(feed)
    body = ET.tostring(feed, encoding="unicode")
    return f'<?xml version="1.0" encoding="utf-8"?>\n{body}\n'
