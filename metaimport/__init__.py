"""Generate go-import meta tag pages for Git repositories."""

from .doclinks import DocLinkStrategy, Provider, select_strategy, strategy_for_snapshot
from .resolver import import_path, package_dirs, resolve

__all__ = [
    "DocLinkStrategy",
    "Provider",
    "import_path",
    "package_dirs",
    "resolve",
    "select_strategy",
    "strategy_for_snapshot",
]
