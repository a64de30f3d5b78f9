from .loader import load_config
from .models import (
    LayoutConfig,
    MdPressConfig,
    PipelineConfig,
    RendererConfig,
    SourcesConfig,
    TemplatesConfig,
)

__all__ = [
    "LayoutConfig",
    "MdPressConfig",
    "PipelineConfig",
    "RendererConfig",
    "SourcesConfig",
    "TemplatesConfig",
    "load_config",
]
