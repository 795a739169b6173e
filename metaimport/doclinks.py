"""Source browsing links for the go-source meta tag.

Formats, as documented at https://github.com/golang/gddo/wiki/Source-Code-Links:

GitHub embeds the branch name in the URL:
    directory: https://github.com/go-yaml/yaml/tree/<branch>/some/directory
    file:      https://github.com/go-yaml/yaml/tree/<branch>/some/directory/file.go#L42

Bitbucket accepts HEAD in place of a commit hash, which always points at the
default branch. Its links are therefore only correct when the default branch
is the one being described:
    directory: https://bitbucket.org/user/repo/src/HEAD/some/directory
    file:      https://bitbucket.org/user/repo/src/HEAD/some/directory/file.go?fileviewer=file-view-default#file.go-42
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from .logging import get_logger
from .models import RepoSnapshot, short_branch

HOME_SENTINEL = "_"

_logger = get_logger("doclinks")


class Provider(enum.Enum):
    """Hosting providers with known source browsing URL formats."""

    GITHUB = "github.com"
    BITBUCKET = "bitbucket.org"
    DEFAULT = ""


@dataclass(frozen=True)
class DocLinkStrategy:
    """URL templates for browsing a repository's source on its host."""

    provider: Provider
    repo_url: str
    branch: Optional[str] = None

    def home(self) -> str:
        if self.provider is Provider.DEFAULT:
            return self.repo_url
        return HOME_SENTINEL

    def directory(self) -> str:
        if self.provider is Provider.GITHUB:
            return f"{self.repo_url}/tree/{self.branch}{{/dir}}"
        if self.provider is Provider.BITBUCKET:
            return f"{self.repo_url}/src/HEAD{{/dir}}"
        return self.repo_url

    def file(self) -> str:
        if self.provider is Provider.GITHUB:
            return f"{self.repo_url}/tree/{self.branch}{{/dir}}/{{file}}#L{{line}}"
        if self.provider is Provider.BITBUCKET:
            return (
                f"{self.repo_url}/src/HEAD{{/dir}}/{{file}}"
                "?fileviewer=file-view-default#{file}-{line}"
            )
        return self.repo_url


def _host(repo_url: str) -> str | None:
    try:
        return urlparse(repo_url).hostname
    except ValueError as exc:
        _logger.debug("Could not parse repository URL %r: %s", repo_url, exc)
        return None


def strategy_for_snapshot(snapshot: RepoSnapshot) -> DocLinkStrategy:
    """Pick the link strategy for a fetched snapshot, falling back to DEFAULT."""
    repo_url = snapshot.repo_url
    host = _host(repo_url)
    if host == Provider.GITHUB.value:
        return DocLinkStrategy(Provider.GITHUB, repo_url, snapshot.branch or "HEAD")
    if host == Provider.BITBUCKET.value:
        if snapshot.used_default_branch or (
            snapshot.branch is not None and snapshot.is_default_branch(snapshot.branch)
        ):
            return DocLinkStrategy(Provider.BITBUCKET, repo_url)
        _logger.debug(
            "Branch %s is not the default branch %s; using plain repository links",
            snapshot.branch,
            snapshot.default_branch,
        )
    return DocLinkStrategy(Provider.DEFAULT, repo_url)


def select_strategy(
    repo_url: str,
    requested_branch: str | None,
    used_default_branch: bool,
    default_branch: str | None,
) -> DocLinkStrategy:
    """Pick the link strategy for the repository host, falling back to DEFAULT."""
    requested = short_branch(requested_branch) if requested_branch else None
    default = short_branch(default_branch) if default_branch else None
    snapshot = RepoSnapshot(
        repo_url=repo_url,
        files=(),
        branch=default if used_default_branch else requested,
        default_branch=default,
        used_default_branch=used_default_branch,
    )
    return strategy_for_snapshot(snapshot)


__all__ = [
    "HOME_SENTINEL",
    "DocLinkStrategy",
    "Provider",
    "select_strategy",
    "strategy_for_snapshot",
]
