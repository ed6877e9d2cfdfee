"""Generate an Atom feed from a git-versioned content directory."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable

from . import __version__
from .config import FeedConfig, load_config
from .errors import GitFeedError
from .pipeline import generate_feed


def _resolve_config(args: argparse.Namespace) -> FeedConfig:
    config = load_config(args.config) if args.config is not None else FeedConfig()
    return config.with_overrides(
        repo_path=args.repo,
        content_dir=args.content_dir,
        limit=args.limit,
        link_prefix=args.link_prefix,
        feed_title=args.title,
        rev=args.rev,
        template=args.template,
    ).validate()


def _configure_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gitfeed", description=__doc__)
    parser.add_argument(
        "--config",
        type=Path,
        help="JSON file with feed settings; command line options take precedence",
    )
    parser.add_argument(
        "--repo",
        type=Path,
        help="Path to the git working tree (defaults to the current directory)",
    )
    parser.add_argument(
        "--content-dir",
        help="Document directory relative to the repository root (default: content)",
    )
    parser.add_argument("--limit", type=int, help="Maximum number of entries (default: 20)")
    parser.add_argument("--link-prefix", help="Prefix for entry ids and links")
    parser.add_argument("--title", help="Feed title")
    parser.add_argument("--rev", help="Reference whose history is walked (default: HEAD)")
    parser.add_argument(
        "--template",
        type=Path,
        help="Jinja2 feed template; the built-in Atom layout is used when omitted",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr; repeat for debug output",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    _configure_logging(args.verbose)

    try:
        config = _resolve_config(args)
        output = generate_feed(config)
    except GitFeedError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
