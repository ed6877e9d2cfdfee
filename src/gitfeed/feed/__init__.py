"""Feed entry construction and Atom rendering."""

from .atom import ATOM_NAMESPACE, FeedEntry, build_entry, render_feed
from .render import read_document, render_markdown
from .template import render_template, template_context

__all__ = [
    "ATOM_NAMESPACE",
    "FeedEntry",
    "build_entry",
    "read_document",
    "render_feed",
    "render_markdown",
    "render_template",
    "template_context",
]
