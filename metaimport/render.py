"""HTML rendering of go-import pages."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from .errors import RenderError
from .models import ImportMetadata

DEFAULT_TEMPLATE = "index.html.j2"


class PageRenderer:
    """Renders ImportMetadata into an HTML document using jinja2 templates."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        template_name: str = DEFAULT_TEMPLATE,
    ) -> None:
        self.template_name = template_name
        self._env = self._create_env(templates_dir)

    def render(self, metadata: ImportMetadata) -> str:
        try:
            template = self._env.get_template(self.template_name)
            return template.render(meta=metadata)
        except TemplateError as exc:
            raise RenderError(f"executing template {self.template_name}: {exc}") from exc

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        default_dir = str(Path(__file__).with_name("templates"))
        if default_dir not in directories:
            directories.append(default_dir)
        loader = FileSystemLoader(directories)
        return Environment(
            loader=loader,
            autoescape=select_autoescape(default=True),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )


__all__ = ["DEFAULT_TEMPLATE", "PageRenderer"]
