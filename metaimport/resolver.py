"""Resolution of Go package directories from a repository file listing."""

from __future__ import annotations

import posixpath
from typing import Iterable, Set

from .errors import SnapshotReadError

TESTDATA_DIR = "testdata"
SOURCE_SUFFIX = ".go"
_IGNORED_PREFIXES = (".", "_")


def _is_ignored(path: str) -> bool:
    # 'go help packages': directory and file names that begin with "." or "_"
    # are ignored by the go tool.
    for part in path.split("/"):
        if part.startswith(_IGNORED_PREFIXES):
            return True
    return False


def resolve(files: Iterable[str]) -> Set[str]:
    """Return the directories that directly contain at least one Go source file.

    The repository root is represented by the empty string. Directories named
    ``testdata`` are never packages, and neither are directories whose only
    Go files are hidden or prefixed with an underscore.
    """
    dirs: Set[str] = set()
    iterator = iter(files)
    while True:
        try:
            name = next(iterator)
        except StopIteration:
            break
        except OSError as exc:
            raise SnapshotReadError(f"getting next file in tree: {exc}") from exc

        directory = posixpath.dirname(name)
        if posixpath.basename(directory) == TESTDATA_DIR:
            continue
        if _is_ignored(name) or not name.endswith(SOURCE_SUFFIX):
            continue
        dirs.add(directory)
    return dirs


package_dirs = resolve


def import_path(prefix: str, unit: str) -> str:
    """Join the root import prefix with a package directory."""
    if not unit:
        return prefix
    return posixpath.join(prefix, unit)


__all__ = ["SOURCE_SUFFIX", "TESTDATA_DIR", "import_path", "package_dirs", "resolve"]
