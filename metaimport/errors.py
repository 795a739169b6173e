"""Exception hierarchy for metaimport runs."""

from __future__ import annotations


class MetaImportError(RuntimeError):
    """Base class for failures that abort a generation run."""


class SnapshotReadError(MetaImportError):
    """Raised when the repository file listing cannot be read."""


class FetchError(MetaImportError):
    """Raised when the remote repository cannot be fetched."""


class RenderError(MetaImportError):
    """Raised when a page cannot be rendered for a package directory."""


class OutputCollisionError(MetaImportError):
    """Raised when two pages would be written to the same location."""


class WriteError(MetaImportError):
    """Raised when a generated page cannot be written to disk."""


__all__ = [
    "FetchError",
    "MetaImportError",
    "OutputCollisionError",
    "RenderError",
    "SnapshotReadError",
    "WriteError",
]
