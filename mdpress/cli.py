"""CLI entry point for mdpress."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table

from mdpress.compiler import MarkdownToPdf
from mdpress.config import MdPressConfig, load_config
from mdpress.config.loader import DEFAULT_CONFIG_TEMPLATE
from mdpress.errors import MdPressError

app = typer.Typer(
    name="mdpress",
    help="Compile directories of markdown files into a single styled PDF.",
)

config_app = typer.Typer(help="Manage mdpress configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: MdPressConfig | None = None

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": self.formatTime(record),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def _configure_logging(cfg: MdPressConfig) -> None:
    level = _LOG_LEVELS[cfg.log_level]
    if cfg.log_format == "json":
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
    else:
        handler = RichHandler(show_path=False, markup=False, rich_tracebacks=True)
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)


def _get_config() -> MdPressConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to mdpress.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except MdPressError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    _configure_logging(_config)


def _with_overrides(
    cfg: MdPressConfig, sources: list[str] | None, title: str | None = None
) -> MdPressConfig:
    """Apply command-line overrides without touching the loaded config."""
    update: dict = {}
    if sources:
        update["sources"] = cfg.sources.model_copy(update={"directories": sources})
    if title:
        update["title"] = title
    return cfg.model_copy(update=update) if update else cfg


SourceOption = Annotated[
    list[str] | None,
    typer.Option("--source", "-s", help="Directory of .md files (repeatable)"),
]


@app.command()
def build(
    output: str = typer.Argument(..., help="Path of the PDF to write"),
    source: SourceOption = None,
    title: Annotated[str | None, typer.Option("--title", help="Document title")] = None,
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing PDF"),
) -> None:
    """Compile the source markdown into a PDF."""
    cfg = _with_overrides(_get_config(), source, title)
    rprint(f"[bold]Building[/bold] {output}...")
    try:
        saved = MarkdownToPdf(cfg).save_compiled_pdf_to(output, overwrite=force)
    except MdPressError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if not saved:
        rprint(f"[yellow]{output} already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    rprint(f"[green]Wrote[/green] {output}")


@app.command()
def html(
    source: SourceOption = None,
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Write HTML to file")
    ] = None,
) -> None:
    """Compile the source markdown into HTML (no PDF)."""
    cfg = _with_overrides(_get_config(), source)
    try:
        compiled = MarkdownToPdf(cfg).get_compiled_html()
    except MdPressError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if output:
        Path(output).write_text(compiled, encoding="utf-8")
        rprint(f"[green]Written to[/green] {output}")
    else:
        typer.echo(compiled)


@app.command()
def files(source: SourceOption = None) -> None:
    """List the markdown files that would be compiled."""
    cfg = _with_overrides(_get_config(), source)
    try:
        paths = MarkdownToPdf(cfg).get_markdown_files()
    except MdPressError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title=f"Source files ({len(paths)})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("File", style="cyan", no_wrap=True)
    table.add_column("Directory", style="dim")
    for i, path in enumerate(paths, start=1):
        table.add_row(str(i), path.name, str(path.parent))
    rprint(table)


@app.command()
def layout() -> None:
    """Show the wkhtmltopdf options derived from the layout template."""
    cfg = _get_config()
    try:
        options = MarkdownToPdf(cfg).get_pdf_options()
    except MdPressError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title="wkhtmltopdf options")
    table.add_column("Option", style="cyan")
    table.add_column("Value", style="green")
    for key, value in options.items():
        table.add_row(key, "(flag)" if value is None else repr(value))
    rprint(table)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(mode="json"), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default mdpress.yaml in current directory."""
    target = Path("mdpress.yaml")
    if target.exists() and not force:
        rprint("[yellow]mdpress.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
