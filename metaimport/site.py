"""Assembly of per-package pages from resolved directories."""

from __future__ import annotations

from typing import Iterable, List

from .doclinks import DocLinkStrategy
from .errors import RenderError
from .logging import get_logger
from .models import ImportMetadata, Page, SourceLinks
from .render import PageRenderer
from .resolver import import_path

VCS_GIT = "git"


class SiteAssembler:
    """Builds and renders one page per package directory."""

    def __init__(self, renderer: PageRenderer | None = None) -> None:
        self.renderer = renderer or PageRenderer()
        self.logger = get_logger("site")

    def build_metadata(
        self,
        import_prefix: str,
        repo_url: str,
        unit: str,
        strategy: DocLinkStrategy,
        *,
        godoc: bool = False,
        redirect: bool = True,
        docs_base_url: str,
    ) -> ImportMetadata:
        # The root prefix, not the package's own import path, goes into
        # go-import so that go get does not need an extra request to find
        # the repository root. See https://npf.io/2016/10/vanity-imports-with-hugo/.
        source = None
        if godoc:
            source = SourceLinks(
                prefix=import_prefix,
                home=strategy.home(),
                directory=strategy.directory(),
                file=strategy.file(),
            )
        return ImportMetadata(
            import_prefix=import_prefix,
            vcs=VCS_GIT,
            repo_root=repo_url,
            source=source,
            docs_url=f"{docs_base_url}/{import_path(import_prefix, unit)}",
            redirect=redirect,
        )

    def assemble(
        self,
        import_prefix: str,
        repo_url: str,
        units: Iterable[str],
        strategy: DocLinkStrategy,
        *,
        godoc: bool = False,
        redirect: bool = True,
        docs_base_url: str,
    ) -> List[Page]:
        """Render a page for every unit; the first rendering failure aborts."""
        pages: List[Page] = []
        for unit in sorted(units):
            full_path = import_path(import_prefix, unit)
            metadata = self.build_metadata(
                import_prefix,
                repo_url,
                unit,
                strategy,
                godoc=godoc,
                redirect=redirect,
                docs_base_url=docs_base_url,
            )
            try:
                content = self.renderer.render(metadata)
            except RenderError as exc:
                raise RenderError(f"executing template for path {full_path}: {exc}") from exc
            pages.append(Page(unit=unit, import_path=full_path, metadata=metadata, content=content))
        self.logger.debug("Rendered %d pages", len(pages))
        return pages


__all__ = ["SiteAssembler", "VCS_GIT"]
