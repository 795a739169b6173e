"""Core data models shared across metaimport components."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

REF_PREFIX = "refs/heads/"


def short_branch(ref: str) -> str:
    """Strip the ``refs/heads/`` qualifier from a branch reference."""
    if ref.startswith(REF_PREFIX):
        return ref[len(REF_PREFIX):]
    return ref


@dataclass(frozen=True)
class RepoSnapshot:
    """File listing of a single branch of a remote repository."""

    repo_url: str
    files: Tuple[str, ...]
    branch: Optional[str] = None
    default_branch: Optional[str] = None
    used_default_branch: bool = True

    def is_default_branch(self, ref: str) -> bool:
        if self.default_branch is None:
            return False
        return short_branch(ref) == short_branch(self.default_branch)


@dataclass(frozen=True)
class SourceLinks:
    """Values for the go-source meta tag."""

    prefix: str
    home: str
    directory: str
    file: str


@dataclass(frozen=True)
class ImportMetadata:
    """Everything the page template needs for one package directory."""

    import_prefix: str
    repo_root: str
    docs_url: str
    vcs: str = "git"
    source: Optional[SourceLinks] = None
    redirect: bool = True


@dataclass
class Page:
    """A rendered document awaiting write-out."""

    unit: str
    import_path: str
    metadata: ImportMetadata
    content: str = field(default="", repr=False)
