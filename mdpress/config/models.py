from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from mdpress.pipeline.hooks import Stage


class SourcesConfig(BaseModel):
    directories: list[str] = []


class TemplatesConfig(BaseModel):
    # Searched before the packaged templates, in order.
    directories: list[str] = []
    page: str = "page.html"
    layout: str = "pdf.xml"
    stylesheet: str = "style.css"


class LayoutConfig(BaseModel):
    page_size: str = "Letter"
    corrected_bottom_margin: bool = False
    concatenate_repeated_styles: bool = True


class PipelineConfig(BaseModel):
    markdown_extensions: list[str] = Field(default_factory=lambda: ["extra"])
    tokens: dict[str, Any] = {}
    urls: dict[str, str] = {}
    resolve_relative_links: bool = False
    hooks: dict[Stage, list[str]] = {}
    max_workers: int = Field(default=1, gt=0)


class RendererConfig(BaseModel):
    wkhtmltopdf: str | None = None
    options: dict[str, Any] = {}


class MdPressConfig(BaseModel):
    title: str = "Documentation"
    sources: SourcesConfig = Field(default_factory=SourcesConfig)
    templates: TemplatesConfig = Field(default_factory=TemplatesConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    renderer: RendererConfig = Field(default_factory=RendererConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title cannot be blank")
        return v
