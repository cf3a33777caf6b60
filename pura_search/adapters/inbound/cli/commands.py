"""CLI interface for Pura Search."""

import json
import os
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ....adapters.outbound.json_corpus_adapter import (
    JSONCorpusAdapter,
    parse_seed_record,
    read_seed_file,
)
from ....adapters.outbound.sqlite_adapter import SQLiteContentAdapter
from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain import ContentCategory, SearchResponse
from ....core.domain.exceptions import InvalidConfigurationError
from ....core.ports.corpus_port import CorpusProviderPort
from ....core.services.search_service import SmartSearchService
from ...common.exception_handler import format_exception_json

app = typer.Typer(
    name="pura-search",
    help="Pura Search - keyword search over Balinese Hindu educational content",
    add_completion=False,
)

console = Console()

# Shows full JSON error details
DEBUG_MODE = settings.debug or os.getenv("DEBUG", "false").lower() == "true"


def handle_cli_error(exc: Exception) -> None:
    """Handle and display errors in CLI with structured format.

    In debug mode, shows full JSON error details.
    In normal mode, shows a user-friendly message with error code.

    Args:
        exc: The exception to handle.
    """
    error_data = format_exception_json(exc, include_trace=DEBUG_MODE)

    if DEBUG_MODE:
        console.print(
            Panel(
                json.dumps(error_data, indent=2, default=str),
                title="[bold red]Error Details[/]",
                border_style="red",
            )
        )
    else:
        error_type = error_data["error"]["type"]
        error_msg = error_data["error"]["message"]
        error_code = error_data["error"].get("code", "UNKNOWN")
        location = error_data.get("location", {})

        console.print(f"\n[red]Error {escape(f'[{error_code}]')}:[/] {escape(error_msg)}")
        console.print(f"[dim]Type: {error_type}[/]")

        if location:
            loc_str = f"{location.get('file', '?')}:{location.get('line', '?')} in {location.get('method', '?')}"
            console.print(f"[dim]Location: {loc_str}[/]")

        console.print("[dim]Set DEBUG=true for full details[/]")


def get_repository(db_path: Path | None = None) -> SQLiteContentAdapter:
    """Open the SQLite content repository."""
    path = db_path or settings.database_path
    path.parent.mkdir(parents=True, exist_ok=True)
    return SQLiteContentAdapter(path)


def get_corpus(source: str, corpus_file: Path | None, db_path: Path | None) -> CorpusProviderPort:
    """Build the corpus provider for a command."""
    if source == "json":
        path = corpus_file or settings.corpus_file
        if path is None:
            raise InvalidConfigurationError(
                "A corpus file is required for the json source (--corpus or CORPUS_FILE)"
            )
        return JSONCorpusAdapter(path)
    if source == "sqlite":
        return get_repository(db_path)
    raise InvalidConfigurationError(
        f"Unknown corpus source: {source}", context={"allowed": ["sqlite", "json"]}
    )


def _parse_category(value: str | None) -> ContentCategory | None:
    return ContentCategory.parse(value) if value else None


def _response_to_dict(response: SearchResponse) -> dict[str, Any]:
    return {
        "query": response.query,
        "results": [
            {
                "content": asdict(result.content),
                "relevanceScore": result.relevance_score,
                "excerpt": result.excerpt,
            }
            for result in response.results
        ],
        "total": response.total,
    }


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging before any command runs."""
    # Console output is the result; keep log lines out of it unless asked for
    setup_logging(
        "DEBUG" if verbose else "WARNING",
        settings.log_file,
        settings.log_json,
    )


@app.command()
def search(
    query: str = typer.Argument(..., help="Keywords or phrase to search for"),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Filter by category"),
    source: str = typer.Option(settings.corpus_source, "--source", help="sqlite or json"),
    corpus_file: Optional[Path] = typer.Option(None, "--corpus", help="JSON corpus file"),
    db_path: Optional[Path] = typer.Option(None, "--db", help="SQLite database path"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw response as JSON"),
) -> None:
    """Search educational content and show ranked results."""
    try:
        service = SmartSearchService(
            get_corpus(source, corpus_file, db_path),
            excerpt_length=settings.excerpt_max_length,
            max_query_length=settings.max_query_length,
        )
        response = service.search(query, _parse_category(category))
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(_response_to_dict(response), indent=2, default=str))
        return

    if not response.results:
        console.print(f"[yellow]No results for[/] {response.query!r}")
        return

    table = Table(title=f"{response.total} result(s) for {response.query!r}")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Title", style="bold")
    table.add_column("Category", style="cyan")
    table.add_column("Excerpt", style="dim")
    for result in response.results:
        table.add_row(
            f"{result.relevance_score:.3f}",
            result.content.title,
            result.content.category.value,
            result.excerpt,
        )
    console.print(table)


@app.command()
def seed(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file of articles"),
    db_path: Optional[Path] = typer.Option(None, "--db", help="SQLite database path"),
) -> None:
    """Load articles from a JSON file into the SQLite database."""
    try:
        repository = get_repository(db_path)
        records = read_seed_file(path)
        new_contents = [parse_seed_record(record) for record in records]
        with console.status(f"[bold green]Seeding {len(new_contents)} articles...[/]"):
            repository.create_contents(new_contents)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    console.print(f"[green]Seeded {len(records)} articles into {repository.db_path}[/]")


@app.command("list")
def list_articles(
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Filter by category"),
    db_path: Optional[Path] = typer.Option(None, "--db", help="SQLite database path"),
) -> None:
    """List stored articles."""
    try:
        contents = get_repository(db_path).list_content(_parse_category(category))
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    table = Table(title=f"{len(contents)} article(s)")
    table.add_column("ID", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Category", style="cyan")
    table.add_column("Updated", style="dim")
    for content in contents:
        table.add_row(
            str(content.id),
            content.title,
            content.category.value,
            content.updated_at.strftime("%Y-%m-%d %H:%M"),
        )
    console.print(table)


@app.command()
def status() -> None:
    """Show configuration and corpus status."""
    console.print("[bold]Pura Search Status[/]\n")
    console.print(f"Corpus source: {settings.corpus_source}")
    console.print(f"Database: {settings.database_path}")
    if settings.corpus_file:
        console.print(f"Corpus file: {settings.corpus_file}")

    try:
        corpus = get_corpus(settings.corpus_source, None, None)
        contents = corpus.list_content()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    console.print(f"✅ Corpus available: {len(contents)} articles")
    for category in ContentCategory:
        count = sum(1 for content in contents if content.category is category)
        if count:
            console.print(f"  [dim]{category.value}: {count}[/]")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(8000, help="Port"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "pura_search.adapters.inbound.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    app()
