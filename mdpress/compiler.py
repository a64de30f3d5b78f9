"""MarkdownToPdf: compiles a set of markdown files into one PDF.

wkhtmltopdf must be installed; it is driven through pdfkit.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from functools import cached_property
from pathlib import Path
from typing import Any

import pdfkit
from pdfkit.configuration import Configuration

from mdpress.collector import collect_source_files
from mdpress.config.models import MdPressConfig
from mdpress.errors import ExternalProcessError
from mdpress.layout import PdfRenderConfig, derive_config, load_layout
from mdpress.pipeline import (
    DocumentPipeline,
    HookRegistry,
    SourceDocument,
    Stage,
    get_url_tokens,
    registry_from_paths,
    relative_link_hook,
)
from mdpress.templating import TemplateRenderer

logger = logging.getLogger(__name__)

# Derived options whose empty/zero value means "not set". pdfkit would pass
# them as bare flags, so they are dropped instead.
_UNSET_IF_FALSY = {
    f"{region}-{field}"
    for region in ("header", "footer")
    for field in ("font-name", "font-size", "left", "center", "right")
}


def to_pdfkit_options(config: PdfRenderConfig) -> dict[str, str | None]:
    """Adapt an option map to pdfkit, which treats None and "" as bare flags."""
    options: dict[str, str | None] = {}
    for key, value in config.items():
        if value is None:
            options[key] = None
        elif key in _UNSET_IF_FALSY and not value:
            continue
        else:
            options[key] = str(value)
    return options


class MarkdownToPdf:
    """Builds HTML from the configured sources and saves it as a PDF.

    Hooks named in ``config.pipeline.hooks`` are appended to ``hooks`` (or a
    new registry) after any the caller registered.
    """

    def __init__(
        self,
        config: MdPressConfig | None = None,
        *,
        hooks: HookRegistry | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or MdPressConfig()
        self.renderer = renderer or TemplateRenderer(self.config.templates.directories)
        self.hooks = hooks if hooks is not None else HookRegistry()
        self._filters: list[Callable] = []

        registry_from_paths(self.config.pipeline.hooks, self.hooks)
        if self.config.pipeline.resolve_relative_links:
            self.hooks.register(Stage.html, relative_link_hook)

    # -- filters -------------------------------------------------------------

    @property
    def filters(self) -> tuple[Callable, ...]:
        return tuple(self._filters)

    def add_filter(self, filter_fn: Callable) -> None:
        self._filters.append(filter_fn)

    def remove_filters(self) -> None:
        self._filters = []

    # -- documents -----------------------------------------------------------

    @cached_property
    def pipeline(self) -> DocumentPipeline:
        return DocumentPipeline(
            renderer=self.renderer,
            hooks=self.hooks,
            tokens=self.get_tokens(),
            markdown_extensions=self.config.pipeline.markdown_extensions,
        )

    def get_tokens(self) -> dict[str, Any]:
        tokens: dict[str, Any] = dict(self.config.pipeline.tokens)
        for name, url in self.config.pipeline.urls.items():
            tokens[name] = get_url_tokens(url)
        return tokens

    def get_markdown_files(self) -> list[Path]:
        return collect_source_files(self.config.sources.directories)

    def render_documents(self) -> list[SourceDocument]:
        """Render every source file; results follow sorted path order."""
        files = self.get_markdown_files()
        workers = min(self.config.pipeline.max_workers, len(files))
        if workers <= 1:
            return [self.pipeline.render_document(f) for f in files]
        logger.debug("rendering %d files with %d workers", len(files), workers)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(self.pipeline.render_document, files))

    def get_css_stylesheets(self) -> dict[str, Path]:
        """Stylesheet paths keyed by name; user template dirs shadow the built-in one."""
        name = self.config.templates.stylesheet
        path = self.renderer.find_file(name)
        return {name: path} if path else {}

    def get_compiled_html(self) -> str:
        documents = self.render_documents()
        styles = {
            name: path.read_text(encoding="utf-8")
            for name, path in self.get_css_stylesheets().items()
        }
        html = self.renderer.render(
            self.config.templates.page,
            {
                "page": {"title": self.config.title, "styles": styles},
                "documents": documents,
            },
        )
        logger.info("compiled %d document(s) into %d chars of HTML", len(documents), len(html))
        return html

    # -- pdf -----------------------------------------------------------------

    def get_pdf_options(self) -> PdfRenderConfig:
        """User renderer options overlaid with the options derived from the layout."""
        layout = load_layout(self.renderer, self.config.title, self.config.templates.layout)
        derived = derive_config(
            layout,
            page_size=self.config.layout.page_size,
            corrected_bottom_margin=self.config.layout.corrected_bottom_margin,
            concatenate_repeated=self.config.layout.concatenate_repeated_styles,
        )
        return {**self.config.renderer.options, **derived}

    def save_compiled_pdf_to(self, pdf_path: str | Path, overwrite: bool = False) -> bool:
        """Write the PDF. Returns False, leaving the file alone, if it exists and not ``overwrite``."""
        pdf_path = Path(pdf_path)
        if not overwrite and pdf_path.exists():
            logger.warning("%s exists; not overwriting", pdf_path)
            return False

        options = to_pdfkit_options(self.get_pdf_options())
        html = self.get_compiled_html()
        try:
            configuration = self._pdfkit_configuration()
            result = pdfkit.from_string(
                html, str(pdf_path), options=options, configuration=configuration
            )
        except OSError as e:
            raise ExternalProcessError("render", e) from e

        logger.info("wrote %s", pdf_path)
        return bool(result)

    def _pdfkit_configuration(self) -> Configuration | None:
        binary = self.config.renderer.wkhtmltopdf
        if binary:
            return pdfkit.configuration(wkhtmltopdf=binary)
        return None
