"""Pick the most recently touched documents from a populated registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .registry import DocumentRecord, DocumentRegistry


def select_top_n(registry: "DocumentRegistry", n: int) -> List["DocumentRecord"]:
    """Return up to ``n`` touched records, most recently touched first.

    Pending records are left out. Equal ``last_touched`` values keep the
    registry's path order since the sort is stable.
    """

    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    ranked = sorted(registry.touched(), key=lambda record: record.last_touched, reverse=True)
    return ranked[:n]
