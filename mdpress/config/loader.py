"""YAML config loading with env var expansion."""

import logging
import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from mdpress.errors import ConfigurationError

from .models import MdPressConfig

logger = logging.getLogger(__name__)


def load_config(cli_path: str | None = None) -> MdPressConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    if cli_path and not Path(cli_path).exists():
        raise ConfigurationError(f"Config file not found: {cli_path}")

    config_paths = [
        Path(cli_path) if cli_path else None,
        Path("./mdpress.yaml"),
        Path.home() / ".mdpress" / "config.yaml",
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                if not isinstance(raw, dict):
                    raise ConfigurationError(f"Invalid config in {path}: expected a mapping")
                raw = _expand_env_vars(raw)
                logger.debug("loaded config from %s", path)
                return MdPressConfig(**raw)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ConfigurationError(f"Invalid config in {path}: {e}") from e

    return MdPressConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `mdpress config init`
DEFAULT_CONFIG_TEMPLATE = """\
# mdpress.yaml

# Title passed to the page and layout templates
title: "Documentation"

# Directories searched (non-recursively) for *.md files
sources:
  directories:
    - "./docs"

# Templates
templates:
  directories: []              # searched before the built-in templates
  page: "page.html"
  layout: "pdf.xml"            # optional; defaults are used when missing
  stylesheet: "style.css"

# Page geometry derived from the layout template
layout:
  page_size: "Letter"
  corrected_bottom_margin: false      # read page margin-bottom instead of margin-top
  concatenate_repeated_styles: true   # false: last declaration wins

# Per-file pipeline
pipeline:
  markdown_extensions: ["extra"]
  tokens: {}
  urls: {}                     # name: https://... exposed as {{ name.link }}
  resolve_relative_links: false
  hooks:
    fileload: []               # "package.module:callable"
    markdown: []
    html: []
  max_workers: 1

# wkhtmltopdf
renderer:
  wkhtmltopdf: null            # path to the binary; PATH lookup when null
  options: {}

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
