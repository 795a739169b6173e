"""Git collaborators for fetching remote repositories."""

from .fetch import GitFetcher, parse_symref

__all__ = ["GitFetcher", "parse_symref"]
