"""gitfeed package.

Builds an Atom feed for a git-versioned content directory, dating and
attributing every document from the repository history.
"""

__version__ = "0.1.0"

__all__ = [
    "config",
    "documents",
    "errors",
    "feed",
    "git",
    "pipeline",
]
