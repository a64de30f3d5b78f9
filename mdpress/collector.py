"""Source discovery: resolves configured directories to markdown files."""

from __future__ import annotations

import glob
import logging
import os
from pathlib import Path

from mdpress.errors import ConfigurationError, NoSourceFilesError

logger = logging.getLogger(__name__)

MARKDOWN_PATTERN = "*.md"


def collect_source_files(directories: list[str | Path]) -> list[Path]:
    """Return every ``*.md`` file directly inside ``directories``.

    Directory entries may themselves be glob patterns (``docs/*``). Paths are
    resolved to absolute canonical form, deduplicated, and sorted so documents
    are always assembled in the same order.
    """
    if not directories:
        raise ConfigurationError("Source directories cannot be empty.")

    found: set[Path] = set()
    for directory in directories:
        pattern = os.path.join(os.path.expanduser(str(directory)), MARKDOWN_PATTERN)
        matches = [Path(p).resolve() for p in glob.glob(pattern) if os.path.isfile(p)]
        logger.debug("%s: %d markdown file(s)", directory, len(matches))
        found.update(matches)

    if not found:
        raise NoSourceFilesError([str(d) for d in directories])

    files = sorted(found)
    logger.info("collected %d source file(s) from %d director(ies)", len(files), len(directories))
    return files
