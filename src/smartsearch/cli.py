"""Command line interface for SmartSearch."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.table import Table

from smartsearch.config import AppConfig
from smartsearch.errors import IngestionError
from smartsearch.ingestion.text_loader import PathUpload
from smartsearch.models import Document
from smartsearch.session import COMPLETED, SearchSession
from smartsearch.utils.files import iter_text_paths
from smartsearch.web.app import app as web_app


console = Console()
app = typer.Typer(help="SmartSearch - keyword search over your documents")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _collect_uploads(inputs: List[Path], config: AppConfig) -> List[PathUpload]:
    return [PathUpload(path) for path in iter_text_paths(inputs, config.accepted_suffixes)]


def _load(session: SearchSession, inputs: List[Path]) -> List[Document]:
    uploads = _collect_uploads(inputs, session.config)
    if not uploads:
        return []
    try:
        return asyncio.run(session.upload(uploads))
    except IngestionError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc


@app.command()
def search(
    query: str = typer.Argument(..., help="Text to look for"),
    inputs: List[Path] = typer.Argument(
        ..., help="Files or directories with documents to search.", resolve_path=True
    ),
    radius: int = typer.Option(AppConfig().snippet_radius, help="Snippet context in characters"),
    delay: float = typer.Option(AppConfig().match_delay, help="Artificial delay before matching"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Load documents and run one query against them."""
    _setup_logging(verbose)
    session = SearchSession(AppConfig(snippet_radius=radius, match_delay=delay))
    _load(session, inputs)

    outcome = asyncio.run(session.search(query))
    if outcome.status != COMPLETED:
        reason = outcome.reason.value if outcome.reason is not None else outcome.status
        console.print(f"[yellow]Query rejected: {reason}.[/yellow]")
        return

    if outcome.results:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Relevance")
        table.add_column("Document")
        table.add_column("Snippet")
        for result in outcome.results:
            snippet = result.snippet.replace("\n", " ")
            table.add_row(f"{round(result.relevance * 100)}%", result.document_name, snippet)
        console.print(table)

    console.print(f"[bold]Answer:[/bold] {outcome.answer}")


@app.command()
def documents(
    inputs: List[Path] = typer.Argument(
        ..., help="Files or directories with documents to load.", resolve_path=True
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Load documents and list them."""
    _setup_logging(verbose)
    session = SearchSession()
    loaded = _load(session, inputs)
    if not loaded:
        console.print("[yellow]No documents found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name")
    table.add_column("Size")
    table.add_column("Uploaded")
    for doc in loaded:
        table.add_row(doc.name, doc.size, doc.upload_date)
    console.print(table)


@app.command()
def web(
    host: str = typer.Option(AppConfig().host, help="Host interface"),
    port: int = typer.Option(AppConfig().port, help="Server port"),
    delay: float = typer.Option(AppConfig().match_delay, help="Artificial delay before matching"),
) -> None:
    """Start the web interface."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    web_app.state.config = AppConfig(host=host, port=port, match_delay=delay)
    console.print(f"Starting web interface on http://{host}:{port}")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
