"""Derive wkhtmltopdf page options from the layout template.

The layout template (``pdf.xml`` by default) is a Jinja2 template that renders
to a small XML document::

    <page style="margin-top: .75in; margin-left: .5in; margin-right: .5in">
      <header style="margin-bottom: .25in; font-family: Helvetica, Arial; font-size: 9pt">
        <left>{{ project.name }}</left>
        <center></center>
        <right>Page {{ pageNumber }} of {{ totalPages }}</right>
      </header>
      <footer style="margin-top: .25in">...</footer>
    </page>

Lengths are read in inches and handed to wkhtmltopdf in millimeters.
"""

from __future__ import annotations

import logging
from functools import partial

from mdpress.layout.models import LayoutDescriptor, PdfRenderConfig
from mdpress.layout.styles import first_csv, get_style_value, to_int
from mdpress.layout.units import inches_to_mm
from mdpress.templating import TemplateRenderer

logger = logging.getLogger(__name__)

# wkhtmltopdf does not draw a header/footer into a smaller margin than this (mm).
MIN_HEADER_FOOTER_MARGIN = 5

DEFAULT_PAGE_SIZE = "Letter"

# Substituted by wkhtmltopdf at print time.
PAGE_NUMBER_TOKEN = "[page]"
TOTAL_PAGES_TOKEN = "[toPage]"


def default_config(page_size: str = DEFAULT_PAGE_SIZE) -> PdfRenderConfig:
    return {"enable-forms": None, "page-size": page_size}


def load_layout(
    renderer: TemplateRenderer,
    project_title: str,
    template: str = "pdf.xml",
) -> LayoutDescriptor | None:
    """Render and parse the layout template; None when there is no layout to apply."""
    if not renderer.has_template(template):
        logger.debug("no layout template %s; using default page options", template)
        return None

    xml = renderer.render(
        template,
        {
            "pageNumber": PAGE_NUMBER_TOKEN,
            "totalPages": TOTAL_PAGES_TOKEN,
            "project": {"name": project_title},
        },
    )
    if not xml.strip():
        logger.debug("layout template %s rendered empty", template)
        return None
    return LayoutDescriptor.from_xml(xml, template)


def derive_config(
    layout: LayoutDescriptor | None,
    *,
    page_size: str = DEFAULT_PAGE_SIZE,
    corrected_bottom_margin: bool = False,
    concatenate_repeated: bool = True,
) -> PdfRenderConfig:
    """Build the wkhtmltopdf option map for ``layout``.

    With ``corrected_bottom_margin`` off, the bottom margin is computed from
    the page's ``margin-top`` declaration, matching documents laid out for
    earlier releases. Turn it on to use ``margin-bottom``.
    """
    defaults = default_config(page_size)
    if layout is None:
        return defaults

    style = partial(get_style_value, concatenate=concatenate_repeated)
    header, footer = layout.header, layout.footer

    has_header = header.has_content
    header_spacing = style("margin-bottom", header.style, inches_to_mm) if has_header else 0

    has_footer = footer.has_content
    footer_spacing = style("margin-top", footer.style, inches_to_mm) if has_footer else 0

    page_top = style("margin-top", layout.style, inches_to_mm)
    page_top = max(MIN_HEADER_FOOTER_MARGIN if has_header else 0, page_top)
    page_top += header_spacing

    bottom_key = "margin-bottom" if corrected_bottom_margin else "margin-top"
    page_bottom = style(bottom_key, layout.style, inches_to_mm)
    page_bottom = max(MIN_HEADER_FOOTER_MARGIN if has_footer else 0, page_bottom)
    page_bottom += footer_spacing

    config: PdfRenderConfig = {
        # Gap between footer and content, mm.
        "footer-spacing": footer_spacing,
        "footer-font-name": style("font-family", footer.style, first_csv),
        "footer-font-size": style("font-size", footer.style, to_int),
        "footer-left": footer.left,
        "footer-center": footer.center,
        "footer-right": footer.right,
        "header-font-name": style("font-family", header.style, first_csv),
        "header-font-size": style("font-size", header.style, to_int),
        "header-left": header.left,
        "header-center": header.center,
        "header-right": header.right,
        # Gap between header and content, mm.
        "header-spacing": header_spacing,
        "margin-top": page_top,
        "margin-bottom": page_bottom,
        "margin-left": style("margin-left", layout.style, inches_to_mm),
        "margin-right": style("margin-right", layout.style, inches_to_mm),
    }
    logger.debug(
        "derived layout: header=%s footer=%s top=%smm bottom=%smm",
        has_header, has_footer, page_top, page_bottom,
    )
    return {**defaults, **config}
