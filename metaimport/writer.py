"""Write-out of rendered pages to the output directory."""

from __future__ import annotations

import os
from pathlib import Path, PurePosixPath
from typing import Dict, List, Sequence

from .errors import OutputCollisionError, WriteError
from .logging import get_logger
from .models import Page

INDEX_FILENAME = "index.html"
PERM_DIR = 0o755
PERM_FILE = 0o644


class SiteWriter:
    """Maps each page to ``<output_dir>/<import path>/index.html`` and writes it."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)
        self.logger = get_logger("writer")

    def target(self, page: Page) -> Path:
        return self.output_dir.joinpath(*PurePosixPath(page.import_path).parts, INDEX_FILENAME)

    def check_collisions(self, pages: Sequence[Page]) -> None:
        """Reject page sets where one page's file would sit where another needs a directory.

        A repository containing both ``a/a.go`` and ``a/index.html/b.go`` needs
        ``a/index.html`` as a file and as a directory at the same time.
        """
        files: Dict[PurePosixPath, Page] = {}
        for page in pages:
            location = PurePosixPath(page.import_path, INDEX_FILENAME)
            if location in files:
                raise OutputCollisionError(
                    f"pages for {files[location].import_path} and {page.import_path} "
                    f"both write {location}"
                )
            files[location] = page

        for page in pages:
            directory = PurePosixPath(page.import_path)
            for ancestor in (directory, *directory.parents):
                other = files.get(ancestor)
                if other is not None:
                    raise OutputCollisionError(
                        f"page for {page.import_path} needs directory {ancestor}, "
                        f"which is the document file for {other.import_path}"
                    )

    def write(self, pages: Sequence[Page], *, dry_run: bool = False) -> List[Path]:
        """Write every page, aborting on the first failure."""
        self.check_collisions(pages)
        targets = [self.target(page) for page in pages]
        if dry_run:
            return targets

        self._mkdir(self.output_dir)
        for page, path in zip(pages, targets):
            self._mkdir(path.parent)
            try:
                path.write_text(page.content, encoding="utf-8")
                os.chmod(path, PERM_FILE)
            except OSError as exc:
                raise WriteError(f"writing file {path}: {exc}") from exc
            self.logger.debug("Wrote %s", path)
        return targets

    @staticmethod
    def _mkdir(path: Path) -> None:
        try:
            path.mkdir(mode=PERM_DIR, parents=True, exist_ok=True)
        except OSError as exc:
            raise WriteError(f"making directory {path}: {exc}") from exc


__all__ = ["INDEX_FILENAME", "SiteWriter"]
