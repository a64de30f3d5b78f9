"""Helpers for links in converted HTML and URL tokens."""

from __future__ import annotations

import re
from pathlib import Path

from mdpress.errors import InvalidArgumentError
from mdpress.pipeline.hooks import FileContext

_LINK_ATTR = re.compile(r'((?:href|src)=")(.+?)(")')
_SCHEME = re.compile(r"^https?://")


def resolve_relative_paths(basepath: str | Path, html: str) -> str:
    """Rewrite relative ``href``/``src`` values in ``html`` against ``basepath``.

    ``images/...`` is pointed at ``<basepath>/images/``; any other value not
    starting with ``http`` is joined onto ``basepath``.
    """
    if not Path(basepath).is_dir():
        raise InvalidArgumentError(f'"{basepath}" is not a directory.')

    base = str(basepath).rstrip("/")
    images_dir = f"{base}/images".rstrip("/")

    def _rewrite(match: re.Match) -> str:
        prefix, value, suffix = match.groups()
        if value.startswith("images"):
            value = value.replace("images/", f"{images_dir}/")
        elif not value.startswith("http"):
            value = f"{base}/{value.strip('/')}"
        return f"{prefix}{value}{suffix}"

    return _LINK_ATTR.sub(_rewrite, html)


def relative_link_hook(html: str, context: FileContext) -> str:
    """``html`` stage hook resolving links against the source file's directory."""
    return resolve_relative_paths(context.path.parent, html)


def get_url_tokens(url: str) -> dict[str, str]:
    """Token variants of ``url``.

    - url: trailing ``/`` stripped
    - pretty: url without ``http://`` or ``https://``
    - link: an ``<a>`` tag pointing at url, labelled with pretty
    """
    url = url.rstrip("/")
    pretty = _SCHEME.sub("", url)
    return {
        "url": url,
        "pretty": pretty,
        "link": f'<a href="{url}">{pretty}</a>',
    }
