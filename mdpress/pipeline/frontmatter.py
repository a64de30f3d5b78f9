"""YAML front-matter handling for source markdown files."""

from __future__ import annotations

import re
from pathlib import Path

import yaml

from mdpress.errors import FrontmatterParseError

DELIMITER = "---"

_LEADING_DELIMITER = re.compile(r"\A---\n")
_CLOSING_DELIMITER = re.compile(r"^---[ \t]*\r?$", re.MULTILINE)


def normalize_frontmatter(content: str) -> str:
    """Make sure ``content`` starts with exactly one ``---`` line.

    Authors may leave off the opening delimiter (``title: Foo\\n---\\n# Body``);
    any existing one is removed and a fresh one prepended.
    """
    return f"{DELIMITER}\n" + _LEADING_DELIMITER.sub("", content, count=1)


def parse_frontmatter(content: str, path: str | Path | None = None) -> tuple[dict, str]:
    """Split normalized content into ``(metadata, body)``.

    The metadata block ends at the next line that is only ``---``. Without a
    closing delimiter, or when the block is not a YAML mapping, the file has
    no front-matter and everything after the opening line is body. Invalid
    YAML raises FrontmatterParseError.
    """
    if not content.startswith(DELIMITER):
        return {}, content
    rest = content[len(DELIMITER):].lstrip("\r").removeprefix("\n")

    match = _CLOSING_DELIMITER.search(rest)
    if match is None:
        return {}, rest

    fm_text = rest[: match.start()]
    body = rest[match.end():].lstrip("\r\n")
    try:
        metadata = yaml.safe_load(fm_text)
    except yaml.YAMLError as e:
        raise FrontmatterParseError(path, str(e)) from e
    if not fm_text.strip():
        return {}, body
    if not isinstance(metadata, dict):
        # Plain prose above a horizontal rule, not metadata.
        return {}, rest
    return metadata, body
