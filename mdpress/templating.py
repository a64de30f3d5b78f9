"""Jinja2 environment over an ordered list of template directories."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import jinja2

from mdpress.errors import NotFoundError, TemplateParseError

logger = logging.getLogger(__name__)

BUILTIN_TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateRenderer:
    """Renders named templates and template strings.

    Directories are searched in order; the packaged templates are always
    searched last so user directories can override ``page.html`` and
    ``style.css``.
    """

    def __init__(
        self,
        directories: list[str | Path] | None = None,
        *,
        autoescape: bool = True,
        include_builtin: bool = True,
    ) -> None:
        dirs = [Path(d) for d in directories or []]
        if include_builtin and BUILTIN_TEMPLATE_DIR not in dirs:
            dirs.append(BUILTIN_TEMPLATE_DIR)
        self.directories = dirs
        self.autoescape = autoescape
        self._env = jinja2.Environment(
            loader=jinja2.FileSystemLoader([str(d) for d in dirs]),
            autoescape=autoescape,
        )

    def with_options(self, *, autoescape: bool) -> TemplateRenderer:
        """Same directories, different escaping."""
        return TemplateRenderer(self.directories, autoescape=autoescape, include_builtin=False)

    def for_token_replacement(self) -> TemplateRenderer:
        """Renderer used on converted HTML; it must not be escaped twice."""
        return self.with_options(autoescape=False)

    def find_file(self, name: str) -> Path | None:
        for directory in self.directories:
            candidate = directory / name
            if candidate.is_file():
                return candidate
        return None

    def has_template(self, name: str) -> bool:
        return self.find_file(name) is not None

    def render(self, name: str, context: dict[str, Any] | None = None) -> str:
        try:
            template = self._env.get_template(name)
            return template.render(context or {})
        except jinja2.TemplateNotFound as e:
            raise NotFoundError(f"Template not found: {name}") from e
        except jinja2.TemplateSyntaxError as e:
            raise TemplateParseError(name, e.message or str(e), e.lineno) from e
        except jinja2.TemplateError as e:
            raise TemplateParseError(name, e.message or str(e)) from e

    def render_string(
        self, source: str, context: dict[str, Any] | None = None, *, name: str = "<string>"
    ) -> str:
        try:
            template = self._env.from_string(source)
            return template.render(context or {})
        except jinja2.TemplateSyntaxError as e:
            raise TemplateParseError(name, e.message or str(e), e.lineno) from e
        except jinja2.TemplateError as e:
            raise TemplateParseError(name, e.message or str(e)) from e
