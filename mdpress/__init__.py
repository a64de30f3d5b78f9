"""mdpress - compile directories of markdown files into a single styled PDF."""

from mdpress.collector import collect_source_files
from mdpress.compiler import MarkdownToPdf
from mdpress.config import MdPressConfig, load_config
from mdpress.layout import derive_config, get_style_value, inches_to_mm, load_layout
from mdpress.pipeline import DocumentPipeline, FileContext, HookRegistry, Stage

__version__ = "0.1.0"

__all__ = [
    "DocumentPipeline",
    "FileContext",
    "HookRegistry",
    "MarkdownToPdf",
    "MdPressConfig",
    "Stage",
    "collect_source_files",
    "derive_config",
    "get_style_value",
    "inches_to_mm",
    "load_config",
    "load_layout",
]
