"""DocumentPipeline: turns a single markdown file into HTML.

Stages, in order::

    read file -> [fileload] -> front-matter -> [markdown] -> markdown.markdown()
              -> [html] -> token replacement (Jinja2, autoescape off)

Bracketed names are hook stages; see :class:`mdpress.pipeline.hooks.HookRegistry`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import markdown

from mdpress.errors import SourceDecodeError, SourceNotFoundError
from mdpress.pipeline.frontmatter import normalize_frontmatter, parse_frontmatter
from mdpress.pipeline.hooks import FileContext, HookRegistry, Stage
from mdpress.pipeline.models import SourceDocument
from mdpress.templating import TemplateRenderer

logger = logging.getLogger(__name__)


def _read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise SourceNotFoundError(path) from e
    except UnicodeDecodeError as e:
        raise SourceDecodeError(path, str(e)) from e


class DocumentPipeline:
    """Runs source files through the hook stages and renders them to HTML."""

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        hooks: HookRegistry | None = None,
        tokens: dict[str, Any] | None = None,
        markdown_extensions: list[str] | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.hooks = hooks if hooks is not None else HookRegistry()
        self.tokens = dict(tokens or {})
        self.markdown_extensions = list(markdown_extensions or [])
        self._token_renderer = self.renderer.for_token_replacement()

    def get_tokens(self) -> dict[str, Any]:
        """Values available as ``{{ name }}`` inside markdown files."""
        return dict(self.tokens)

    def to_html(self, markdown_text: str) -> str:
        return markdown.markdown(markdown_text, extensions=self.markdown_extensions)

    def render_document(self, path: str | Path) -> SourceDocument:
        """Run every stage for ``path`` and keep the intermediate results."""
        path = Path(path)
        context = FileContext(path=path)
        logger.debug("rendering %s", path)

        raw = _read_source(path)
        contents = self.hooks.fire(Stage.fileload, raw, context)
        metadata, body = parse_frontmatter(normalize_frontmatter(contents), path)

        body = self.hooks.fire(Stage.markdown, body, context)
        html = self.hooks.fire(Stage.html, self.to_html(body), context)
        html = self._token_renderer.render_string(html, self.get_tokens(), name=str(path))

        return SourceDocument(path=path, raw=raw, metadata=metadata, body=body, html=html)

    def render_file_to_html(self, path: str | Path) -> str:
        return self.render_document(path).html

    def get_source_file_meta(self, path: str | Path) -> dict:
        """Front-matter of ``path``; no hooks are fired."""
        path = Path(path)
        metadata, _body = parse_frontmatter(normalize_frontmatter(_read_source(path)), path)
        return metadata
