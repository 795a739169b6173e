"""Pipeline orchestration for a single generation run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .config import CONFIG_FILENAME, DEFAULT_OUTPUT_DIR, MetaImportConfig, load_config
from .doclinks import DocLinkStrategy, strategy_for_snapshot
from .git.fetch import GitFetcher
from .logging import get_logger
from .render import PageRenderer
from .resolver import resolve
from .site import SiteAssembler
from .writer import SiteWriter


@dataclass
class GenerateOutcome:
    """Result of a generation run."""

    output_dir: Path
    files: List[Path]
    units: List[str]
    strategy: DocLinkStrategy
    dry_run: bool


class Orchestrator:
    """Coordinates fetch, resolution, rendering and write-out."""

    def __init__(
        self,
        fetcher: GitFetcher | None = None,
        assembler: SiteAssembler | None = None,
    ) -> None:
        self.fetcher = fetcher or GitFetcher()
        self._assembler = assembler
        self.logger = get_logger("orchestrator")

    def run(
        self,
        import_prefix: str,
        repo_url: str,
        *,
        branch: Optional[str] = None,
        godoc: Optional[bool] = None,
        redirect: Optional[bool] = None,
        output_dir: Optional[Path] = None,
        config: Optional[MetaImportConfig] = None,
        dry_run: bool = False,
    ) -> GenerateOutcome:
        """Generate pages for every Go package in ``repo_url`` under ``import_prefix``."""
        if config is None:
            config = load_config(Path.cwd() / CONFIG_FILENAME)
        import_prefix = import_prefix.rstrip("/")

        branch = branch or config.branch
        godoc = _first(godoc, config.godoc, False)
        redirect = _first(redirect, config.redirect, True)
        target_dir = Path(output_dir or config.output_dir or DEFAULT_OUTPUT_DIR)

        self.logger.info("Fetching %s (branch: %s)", repo_url, branch or "default")
        snapshot = self.fetcher.fetch(repo_url, branch)

        units = sorted(resolve(snapshot.files))
        self.logger.info("Found %d Go package directories", len(units))

        strategy = strategy_for_snapshot(snapshot)
        self.logger.debug("Using %s source links", strategy.provider.name.lower())

        assembler = self._assembler or SiteAssembler(PageRenderer(config.templates_dir))
        pages = assembler.assemble(
            import_prefix,
            repo_url,
            units,
            strategy,
            godoc=godoc,
            redirect=redirect,
            docs_base_url=config.docs_url,
        )

        writer = SiteWriter(target_dir)
        files = writer.write(pages, dry_run=dry_run)
        if not dry_run:
            self.logger.info("Wrote %d pages to %s", len(files), target_dir)

        return GenerateOutcome(
            output_dir=target_dir,
            files=files,
            units=units,
            strategy=strategy,
            dry_run=dry_run,
        )


def _first(*values: Optional[bool]) -> bool:
    for value in values:
        if value is not None:
            return value
    return False


__all__ = ["GenerateOutcome", "Orchestrator"]
