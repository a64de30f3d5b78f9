"""Pydantic models for the document pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel


class SourceDocument(BaseModel):
    """One markdown file as it moves through the pipeline."""

    path: Path
    raw: str
    metadata: dict[str, Any] = {}
    body: str = ""
    html: str = ""

    @property
    def title(self) -> str:
        return str(self.metadata.get("title") or self.path.stem)
