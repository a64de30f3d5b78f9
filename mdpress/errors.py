"""Exception hierarchy for mdpress.

Every error raised by the library derives from MdPressError so callers (and
the CLI) can catch one base class. The original cause is always chained.
"""

from __future__ import annotations

from pathlib import Path


class MdPressError(Exception):
    """Base class for all mdpress errors."""


class ConfigurationError(MdPressError):
    """Raised for unusable configuration: empty source list, bad hook path, invalid file."""


class NotFoundError(MdPressError):
    """Raised when an expected file or file set does not exist."""


class NoSourceFilesError(NotFoundError):
    """Raised when the source directories contain no markdown files."""

    def __init__(self, directories: list[str]) -> None:
        self.directories = directories
        super().__init__(
            f"There are no source files to convert in: {', '.join(directories)}"
        )


class SourceNotFoundError(NotFoundError):
    """Raised when a source markdown file cannot be read."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Source file not found: {self.path}")


class ParseError(MdPressError):
    """Base class for malformed front-matter, style declarations, layouts and templates."""


class FrontmatterParseError(ParseError):
    def __init__(self, path: str | Path | None, reason: str) -> None:
        self.path = Path(path) if path is not None else None
        self.reason = reason
        where = f" in {self.path}" if self.path else ""
        super().__init__(f"Invalid front-matter{where}: {reason}")


class SourceDecodeError(ParseError):
    """Raised when a source file is not valid UTF-8."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot decode {self.path} as UTF-8: {reason}")


class StyleParseError(ParseError):
    """Raised when a style declaration has no ``key: value`` separator."""

    def __init__(self, declaration: str) -> None:
        self.declaration = declaration
        super().__init__(f"Malformed style declaration (missing ':'): {declaration!r}")


class LayoutParseError(ParseError):
    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        self.reason = reason
        super().__init__(f"Layout template {template!r} is not valid XML: {reason}")


class TemplateParseError(ParseError):
    def __init__(self, template: str, reason: str, lineno: int | None = None) -> None:
        self.template = template
        self.reason = reason
        self.lineno = lineno
        at = f" (line {lineno})" if lineno else ""
        super().__init__(f"Template {template!r} failed to render{at}: {reason}")


class InvalidArgumentError(MdPressError, ValueError):
    """Raised when a caller passes an argument that cannot be used."""


class ExternalProcessError(MdPressError):
    """Wraps failures of the wkhtmltopdf process."""

    def __init__(self, operation: str, cause: Exception) -> None:
        self.operation = operation
        super().__init__(f"wkhtmltopdf {operation} failed: {cause}")
        self.__cause__ = cause
