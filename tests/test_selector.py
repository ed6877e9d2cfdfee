"""Recency selection tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from gitfeed.documents import build_registry, select_top_n

BASE = datetime(2021, 1, 1, tzinfo=timezone.utc)


def _registry(touches: dict[str, int], untouched: tuple[str, ...] = ()):
    registry = build_registry(list(touches) + list(untouched))
    for path, days in touches.items():
        registry.lookup(path).touch(BASE + timedelta(days=days), "Alice", "alice@example.org")
    return registry


def test_most_recent_first() -> None:
    registry = _registry({"a.md": 1, "b.md": 3, "c.md": 2})

    assert [record.path for record in select_top_n(registry, 3)] == ["b.md", "c.md", "a.md"]


def test_limit_truncates_without_padding() -> None:
    registry = _registry({"a.md": 1, "b.md": 3, "c.md": 2})

    assert [record.path for record in select_top_n(registry, 2)] == ["b.md", "c.md"]
    assert len(select_top_n(registry, 10)) == 3
    assert select_top_n(registry, 0) == []


def test_untouched_documents_are_excluded() -> None:
    registry = _registry({"b.md": 1}, untouched=("a.md", "z.md"))

    assert [record.path for record in select_top_n(registry, 5)] == ["b.md"]


def test_ties_follow_path_order() -> None:
    registry = _registry({"c.md": 5, "a.md": 5, "b.md": 5, "d.md": 1})

    assert [record.path for record in select_top_n(registry, 4)] == [
        "a.md",
        "b.md",
        "c.md",
        "d.md",
    ]


def test_recency_compares_instants_across_offsets() -> None:
    registry = build_registry(["east.md", "west.md"])
    # 12:00+02:00 is 10:00 UTC, earlier than 11:00 UTC.
    registry.lookup("east.md").touch(
        datetime(2021, 1, 1, 12, tzinfo=timezone(timedelta(hours=2))), "A", "a@example.org"
    )
    registry.lookup("west.md").touch(datetime(2021, 1, 1, 11, tzinfo=timezone.utc), "B", "b@example.org")

    assert [record.path for record in registry.top_n_by_recency(2)] == ["west.md", "east.md"]


def test_negative_limit_is_rejected() -> None:
    with pytest.raises(ValueError):
        select_top_n(_registry({"a.md": 1}), -1)
