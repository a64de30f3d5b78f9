"""Page geometry: inline-style parsing, unit conversion and wkhtmltopdf options."""

from mdpress.layout.deriver import (
    MIN_HEADER_FOOTER_MARGIN,
    default_config,
    derive_config,
    load_layout,
)
from mdpress.layout.models import LayoutDescriptor, LayoutRegion, PdfRenderConfig
from mdpress.layout.styles import get_style_value
from mdpress.layout.units import inches_to_mm

__all__ = [
    "LayoutDescriptor",
    "LayoutRegion",
    "MIN_HEADER_FOOTER_MARGIN",
    "PdfRenderConfig",
    "default_config",
    "derive_config",
    "get_style_value",
    "inches_to_mm",
    "load_layout",
]
