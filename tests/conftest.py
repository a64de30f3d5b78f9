"""Shared test fixtures for mdpress."""

from pathlib import Path

import pytest

from mdpress.config.models import MdPressConfig
from mdpress.pipeline import DocumentPipeline, HookRegistry
from mdpress.templating import TemplateRenderer


SAMPLE_LAYOUT = """\
<page style="margin-top: .5in; margin-bottom: 1in; margin-left: .75in; margin-right: .75in">
  <header style="margin-bottom: .5in; font-family: Helvetica, Arial, sans-serif; font-size: 9pt">
    <left>{{ project.name }}</left>
    <center></center>
    <right>Page {{ pageNumber }} of {{ totalPages }}</right>
  </header>
  <footer style="margin-top: .25in; font-family: Georgia; font-size: 8">
    <left></left>
    <center>Confidential</center>
    <right></right>
  </footer>
</page>
"""


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """A docs directory with two markdown files."""
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "01-intro.md").write_text(
        "---\ntitle: Introduction\n---\n# Intro\n\nWelcome to {{ product }}.\n"
    )
    (docs / "02-usage.md").write_text("# Usage\n\nRun the tool.\n")
    (docs / "notes.txt").write_text("not markdown")
    return docs


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    templates = tmp_path / "templates"
    templates.mkdir()
    return templates


@pytest.fixture
def layout_template_dir(template_dir: Path) -> Path:
    (template_dir / "pdf.xml").write_text(SAMPLE_LAYOUT)
    return template_dir


@pytest.fixture
def renderer(template_dir: Path) -> TemplateRenderer:
    return TemplateRenderer([template_dir])


@pytest.fixture
def hooks() -> HookRegistry:
    return HookRegistry()


@pytest.fixture
def pipeline(renderer, hooks) -> DocumentPipeline:
    return DocumentPipeline(renderer=renderer, hooks=hooks, markdown_extensions=["extra"])


@pytest.fixture
def sample_config(source_dir: Path, template_dir: Path) -> MdPressConfig:
    return MdPressConfig(
        title="Widget Manual",
        sources={"directories": [str(source_dir)]},
        templates={"directories": [str(template_dir)]},
        pipeline={"tokens": {"product": "Widget"}},
    )
