"""Per-document history records and the path-keyed registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import PurePosixPath
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from ..errors import DocumentDataError, DuplicateDocumentError, UntouchedDocumentError
from .selector import select_top_n


@dataclass(frozen=True, slots=True)
class Touch:
    """A single commit's modification of a document."""

    timestamp: datetime
    author_name: Optional[str]
    author_email: Optional[str]


@dataclass(slots=True)
class DocumentRecord:
    """History of one tracked document.

    A record starts pending. The first :meth:`touch` sets ``first_touched``
    and the latest touch together; later touches only replace the latest
    touch. Reading ``last_touched`` or ``last_author`` on a pending record
    raises :class:`UntouchedDocumentError`.
    """

    path: str
    first_touched: Optional[datetime] = field(default=None, init=False)
    latest: Optional[Touch] = field(default=None, init=False, repr=False)

    @property
    def touched(self) -> bool:
        return self.latest is not None

    def touch(
        self,
        timestamp: datetime,
        author_name: Optional[str],
        author_email: Optional[str],
    ) -> None:
        if self.first_touched is None:
            self.first_touched = timestamp
        self.latest = Touch(timestamp, author_name, author_email)

    def last_touch(self) -> Touch:
        if self.latest is None:
            raise UntouchedDocumentError(f"No commit has touched {self.path}")
        return self.latest

    @property
    def last_touched(self) -> datetime:
        return self.last_touch().timestamp

    @property
    def last_author(self) -> Tuple[Optional[str], Optional[str]]:
        touch = self.last_touch()
        return touch.author_name, touch.author_email


class DocumentRegistry:
    """Records keyed by repository-relative path, iterated in path order."""

    def __init__(self) -> None:
        self._records: Dict[str, DocumentRecord] = {}

    def insert_pending(self, path: str) -> DocumentRecord:
        if path in self._records:
            raise DuplicateDocumentError(f"Document already registered: {path}")
        record = DocumentRecord(path=path)
        self._records[path] = record
        return record

    def lookup(self, path: str) -> Optional[DocumentRecord]:
        return self._records.get(path)

    def touched(self) -> List[DocumentRecord]:
        return [record for record in self if record.touched]

    def pending(self) -> List[DocumentRecord]:
        return [record for record in self if not record.touched]

    def top_n_by_recency(self, n: int) -> List[DocumentRecord]:
        return select_top_n(self, n)

    def __iter__(self) -> Iterator[DocumentRecord]:
        for path in sorted(self._records):
            yield self._records[path]

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, path: object) -> bool:
        return path in self._records


def build_registry(paths: Iterable[str]) -> DocumentRegistry:
    """Seed a registry with one pending record per path."""

    registry = DocumentRegistry()
    for path in paths:
        registry.insert_pending(path)
    return registry


def document_slug(path: str) -> str:
    """Return the slug encoded in a ``NN.slug.ext`` file name.

    >>> document_slug("content/01.hello.md")
    'hello'
    """

    parts = PurePosixPath(path).stem.split(".")
    if len(parts) < 2 or not parts[1]:
        raise DocumentDataError(f"Cannot derive a title from file name: {path}")
    return parts[1]
