"""Per-file pipeline: front-matter, stage hooks, markdown conversion, tokens."""

from mdpress.pipeline.document import DocumentPipeline
from mdpress.pipeline.frontmatter import normalize_frontmatter, parse_frontmatter
from mdpress.pipeline.hooks import (
    FileContext,
    Hook,
    HookRegistry,
    Stage,
    load_hook,
    registry_from_paths,
)
from mdpress.pipeline.links import get_url_tokens, relative_link_hook, resolve_relative_paths
from mdpress.pipeline.models import SourceDocument

__all__ = [
    "DocumentPipeline",
    "FileContext",
    "Hook",
    "HookRegistry",
    "SourceDocument",
    "Stage",
    "get_url_tokens",
    "load_hook",
    "normalize_frontmatter",
    "parse_frontmatter",
    "registry_from_paths",
    "relative_link_hook",
    "resolve_relative_paths",
]
