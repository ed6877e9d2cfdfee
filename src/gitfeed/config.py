"""Configuration for a feed generation run."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .documents.scan import DOCUMENT_EXTENSIONS
from .errors import ConfigError


@dataclass(slots=True)
class FeedConfig:
    """Runtime configuration for a single feed generation.

    Attributes
    ----------
    repo_path:
        Working tree of the git repository. Defaults to the current directory.
    content_dir:
        Directory holding the documents, relative to ``repo_path``.
    limit:
        Maximum number of entries in the feed.
    link_prefix:
        Prefix joined with a document's blob id to form entry ids and links.
    feed_title:
        Title of the generated feed.
    feed_id:
        Feed-level id. Falls back to ``link_prefix`` when unset.
    feed_link:
        Optional ``alternate`` link for the feed itself.
    rev:
        Reference whose history is walked and whose tree identifies blobs.
    extensions:
        File suffixes treated as documents.
    template:
        Optional Jinja2 feed template. The built-in Atom layout is used when
        unset.
    """

    repo_path: Path = field(default_factory=Path.cwd)
    content_dir: str = "content"
    limit: int = 20
    link_prefix: str = "https://localhost/read/"
    feed_title: str = "Feed"
    feed_id: Optional[str] = None
    feed_link: Optional[str] = None
    rev: str = "HEAD"
    extensions: Tuple[str, ...] = DOCUMENT_EXTENSIONS
    template: Optional[Path] = None

    @property
    def resolved_feed_id(self) -> str:
        return self.feed_id or self.link_prefix

    def with_overrides(self, **values: Any) -> "FeedConfig":
        """Return a copy with every non-``None`` value in ``values`` applied."""

        changes = {key: value for key, value in values.items() if value is not None}
        try:
            return replace(self, **changes)
        except TypeError as exc:
            raise ConfigError(str(exc)) from exc

    def validate(self) -> "FeedConfig":
        for name in _TEXT_FIELDS:
            if not isinstance(getattr(self, name), str):
                raise ConfigError(f"{name} must be a string, got {getattr(self, name)!r}")
        for name in _OPTIONAL_TEXT_FIELDS:
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"{name} must be a string, got {value!r}")
        if not all(isinstance(suffix, str) for suffix in self.extensions):
            raise ConfigError(f"extensions must be strings, got {list(self.extensions)!r}")
        if isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit < 0:
            raise ConfigError(f"limit must be a non-negative integer, got {self.limit!r}")
        if not self.link_prefix:
            raise ConfigError("link_prefix must not be empty")
        if not self.content_dir:
            raise ConfigError("content_dir must not be empty")
        if not self.extensions:
            raise ConfigError("at least one document extension is required")
        return self


_TEXT_FIELDS = ("content_dir", "link_prefix", "feed_title", "rev")
_OPTIONAL_TEXT_FIELDS = ("feed_id", "feed_link")


def _resolve_path(values: Dict[str, Any], key: str, base: Path) -> None:
    raw = values[key]
    if not isinstance(raw, str):
        raise ConfigError(f"{key} must be a path string, got {raw!r}")
    path = Path(raw).expanduser()
    values[key] = path if path.is_absolute() else base / path


def _coerce(raw: Dict[str, Any], base: Path) -> Dict[str, Any]:
    values = dict(raw)
    for key in ("repo_path", "template"):
        if values.get(key) is not None:
            _resolve_path(values, key, base)
    if "extensions" in values:
        extensions = values["extensions"]
        if isinstance(extensions, str) or not isinstance(extensions, list):
            raise ConfigError("extensions must be a list of suffixes")
        values["extensions"] = tuple(extensions)
    return values


def load_config(path: Path) -> FeedConfig:
    """Load a :class:`FeedConfig` from a JSON file.

    Parameters
    ----------
    path:
        JSON file containing an object whose keys match ``FeedConfig`` fields.
        A relative ``repo_path`` or ``template`` is resolved against the
        file's directory.

    Returns
    -------
    The validated configuration.
    """

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    known = {item.name for item in fields(FeedConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    values = _coerce(raw, Path(path).resolve().parent)
    return FeedConfig().with_overrides(**values).validate()
