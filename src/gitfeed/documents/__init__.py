"""Document records, the registry that holds them, and recency selection."""

from .registry import DocumentRecord, DocumentRegistry, Touch, build_registry, document_slug
from .scan import DOCUMENT_EXTENSIONS, scan_content_dir
from .selector import select_top_n

__all__ = [
    "DOCUMENT_EXTENSIONS",
    "DocumentRecord",
    "DocumentRegistry",
    "Touch",
    "build_registry",
    "document_slug",
    "scan_content_dir",
    "select_top_n",
]
