"""
WCAG Server CLI Application.

Command-line entry point for serving WCAG resources over MCP, reading
single resources, generating the principles and guidelines outline and
building the criteria index.
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text

from ..core import (
    DEFAULT_INDEX_FILE,
    OUTLINE_URI,
    DocumentStore,
    ResourceFacade,
    build_criteria_index,
    load_criteria_index,
    write_criteria_index,
)
from ..exceptions import ConfigurationError, WcagServerError
from ..models import DocumentKind
from ..utils.config import ConfigManager

# Diagnostics go to stderr; stdout carries resource text and the MCP stream.
console = Console(stderr=True)

app = typer.Typer(
    name="wcag",
    help="Serve and inspect WCAG content as markdown MCP resources",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

_config_manager: Optional[ConfigManager] = None
_logger: Optional[logging.Logger] = None


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        verbose: Enable verbose (DEBUG) logging

    Returns:
        Configured logger instance
    """
    logging.getLogger().handlers.clear()

    log_level = logging.DEBUG if verbose else logging.WARNING

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    rich_handler.setLevel(log_level)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
    )

    logger = logging.getLogger("wcag_backend")
    logger.setLevel(log_level)
    return logger


def get_config_manager(config_path: Optional[str] = None) -> ConfigManager:
    """
    Get or create the global configuration manager.

    Raises:
        typer.Exit: If configuration loading fails
    """
    global _config_manager

    if _config_manager is None or config_path:
        try:
            _config_manager = ConfigManager(config_file=config_path, load_env=True)
            _config_manager.load_config()
        except ConfigurationError as e:
            rprint(f"[red]Configuration Error:[/red] {e}")
            raise typer.Exit(1)

    return _config_manager


def get_facade() -> ResourceFacade:
    return ResourceFacade.from_config(get_config_manager())


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(
        None,
        "--config-path",
        "-c",
        help="Path to configuration file (default: wcag.config.json)",
        metavar="PATH",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging (DEBUG level)",
    ),
) -> None:
    """
    WCAG Server CLI - WCAG principles, criteria, understanding documents and techniques as markdown.

    Common workflows:
    • Serve over MCP: wcag serve
    • Read a resource: wcag read wcag://criteria/non-text-content
    • Build the title index: wcag build-index
    """
    global _logger
    _logger = setup_logging(verbose)
    ctx.obj = {"config_path": config_path, "verbose": verbose, "logger": _logger}

    if config_path:
        get_config_manager(config_path)


@app.command()
def serve() -> None:
    """Run the MCP server over STDIO."""
    from wcag_mcp_server.server import create_server

    server = create_server(get_config_manager())
    try:
        asyncio.run(server.run_stdio())
    except Exception as e:
        rprint(f"[red]Server error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def read(
    uri: str = typer.Argument(..., help="Resource URI, e.g. wcag://techniques/H37"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the markdown to a file"),
) -> None:
    """Read one resource and print its markdown."""
    try:
        content = get_facade().read(uri)
    except WcagServerError as e:
        rprint(f"[red]{e.kind}:[/red] {e}")
        raise typer.Exit(1)

    _emit(content.text, output)


@app.command()
def outline(
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the outline to a file (e.g. principles-guidelines.md)"
    ),
) -> None:
    """Generate the principles and guidelines outline with links to each criterion."""
    try:
        content = get_facade().read(OUTLINE_URI)
    except WcagServerError as e:
        rprint(f"[red]{e.kind}:[/red] {e}")
        raise typer.Exit(1)

    _emit(content.text, output)


@app.command("build-index")
def build_index(
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help=f"Index file to write (default: configured index or {DEFAULT_INDEX_FILE})"
    ),
) -> None:
    """Scan every success criterion and write the criteria index."""
    config_manager = get_config_manager()
    corpus_root = config_manager.get_path("corpus.root")
    target = output or config_manager.get_path("corpus.criteria_index") or Path(DEFAULT_INDEX_FILE)

    store = DocumentStore(corpus_root)
    if not store.root_exists():
        rprint(f"[red]Corpus not found:[/red] {corpus_root}")
        raise typer.Exit(1)

    with console.status("Extracting success criteria..."):
        records = build_criteria_index(store)
    path = write_criteria_index(records, target)

    rprint(f"[green]✓[/green] Wrote {len(records)} criteria to {path}")


@app.command()
def info() -> None:
    """Show configuration and corpus status."""
    config_manager = get_config_manager()
    corpus_root = config_manager.get_path("corpus.root")
    index_path = config_manager.get_path("corpus.criteria_index")
    store = DocumentStore(corpus_root)

    info_text = Text()
    info_text.append("WCAG Server Information\n\n", style="bold blue")
    info_text.append(f"Server: {config_manager.get('server.name')} v{config_manager.get('server.version')}\n")
    info_text.append(f"Config file: {config_manager.config_file}\n")
    info_text.append(f"Corpus root: {corpus_root} {'✓' if store.root_exists() else '✗'}\n")
    info_text.append(f"Criteria index: {index_path} ({len(load_criteria_index(index_path))} entries)\n\n")

    if store.root_exists():
        info_text.append("Corpus:\n", style="bold")
        for kind in (DocumentKind.CRITERION, DocumentKind.UNDERSTANDING, DocumentKind.TECHNIQUE):
            namespaces = store.namespaces(kind)
            total = sum(len(store.identifiers(kind, ns)) for ns in namespaces)
            info_text.append(f"• {kind.label}: {total} documents in {', '.join(namespaces) or 'no directories'}\n")

    console.print(Panel(info_text, title="System Information", border_style="blue"))


def _emit(text: str, output: Optional[Path]) -> None:
    if output is None:
        typer.echo(text, nl=False)
        return

    output.write_text(text, encoding="utf-8")
    rprint(f"[green]✓[/green] Output file: {output.resolve()}")


if __name__ == "__main__":
    app()
