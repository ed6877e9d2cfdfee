"""Exception hierarchy for feed generation.

Every error is fatal for a run: the CLI reports it and exits non-zero
without printing a partial feed.
"""


class GitFeedError(Exception):
    """Base exception for gitfeed failures."""


class ConfigError(GitFeedError):
    """Raised when configuration data cannot be processed."""


class RepositoryError(GitFeedError):
    """Raised when the repository cannot be opened, resolved, walked or diffed."""


class ContentError(GitFeedError):
    """Raised when the content directory or a document cannot be read."""


class DocumentDataError(GitFeedError):
    """Raised when a document lacks the metadata needed for a feed entry."""


class UntouchedDocumentError(DocumentDataError):
    """Raised when reading history fields of a document no commit has touched."""


class DuplicateDocumentError(DocumentDataError):
    """Raised when a path is registered twice."""
