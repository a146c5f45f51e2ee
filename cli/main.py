"""CLI entry point — Typer app for docrag commands.

Usage:
    docrag ingest manual.pdf notes.md
    docrag ask "How do I reset the device?"
    docrag search "reset procedure" --limit 5
    docrag documents --limit 20
    docrag delete 12 13
    docrag stats
    docrag status
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from docrag.config import Settings, load_settings
from docrag.errors import UpstreamServiceError, ValidationError
from docrag.logging_setup import configure_logging

app = typer.Typer(
    name="docrag",
    help="Document RAG — ingest files, ask grounded questions, manage the store.",
    no_args_is_help=True,
)

console = Console()

_state: dict[str, Settings] = {}

_INGEST_PATHS = typer.Argument(..., help="PDF, text or Markdown files to ingest")
_DELETE_IDS = typer.Argument(..., help="Store IDs of the chunks to delete")


def _settings() -> Settings:
    if "settings" not in _state:
        _state["settings"] = load_settings()
    return _state["settings"]


def _pipeline(with_llm: bool = False):
    from docrag.pipeline.service import RagPipeline

    return RagPipeline.from_settings(_settings(), with_llm=with_llm)


def _fail(message: str, code: int) -> NoReturn:
    console.print(f"[bold red]Error:[/] {message}")
    raise typer.Exit(code=code)


@app.callback()
def main(
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to a settings YAML file",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Load settings and configure logging for every command."""
    configure_logging("DEBUG" if verbose else None)
    _state["settings"] = load_settings(config)


@app.command()
def ingest(paths: Annotated[list[Path], _INGEST_PATHS]) -> None:
    """Chunk, embed and store one or more documents."""
    pipeline = _pipeline()

    for path in paths:
        try:
            result = pipeline.ingest_file(path)
        except (FileNotFoundError, ValueError) as exc:
            console.print(f"[bold red]Skipped[/] {path.name}: {exc}")
            continue
        except UpstreamServiceError as exc:
            _fail(f"ingesting {path.name} stopped during {exc.stage}: {exc}", 1)

        console.print(f"\n[bold green]Ingested:[/] {path.name}")
        console.print(f"  Chunks: {result.chunks_created}")
        console.print(f"  Stored: {result.chunks_stored}")
        for w in result.warnings:
            console.print(f"  [yellow]Warning:[/] {w}")


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to ask"),
    max_sources: int = typer.Option(
        3, "--max-sources", "-k", min=1, help="Number of context chunks",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw answer as JSON"),
) -> None:
    """Answer a question from the stored documents."""
    pipeline = _pipeline(with_llm=True)

    try:
        answer = pipeline.synthesize_answer(question, max_sources=max_sources)
    except ValidationError as exc:
        _fail(exc.message, 2)
    except UpstreamServiceError as exc:
        _fail(f"Failed to generate an answer ({exc.stage}).", 1)

    if as_json:
        console.print_json(json.dumps(answer.to_dict()))
        return

    console.print(f"\n[bold]Q:[/] {question}")
    console.print(Panel(answer.answer, title="Answer", border_style="green"))

    if answer.sources:
        table = Table(title="Sources")
        table.add_column("#", style="cyan")
        table.add_column("ID")
        table.add_column("Relevance", justify="right")
        table.add_column("Preview")
        for i, s in enumerate(answer.sources, 1):
            table.add_row(str(i), s.id, f"{s.score * 100:.1f}%", s.preview)
        console.print(table)

    console.print(
        f"\n[dim]Model: {answer.model} | {answer.response_time_ms} ms"
        f" | tokens: {answer.tokens_used if answer.tokens_used is not None else 'n/a'}[/]",
    )


@app.command()
def search(
    query: str = typer.Argument(..., help="Search text"),
    limit: int = typer.Option(5, "--limit", "-k", min=1, help="Maximum results"),
) -> None:
    """Show the chunks most similar to a query."""
    pipeline = _pipeline()
    try:
        results = pipeline.search(query, limit=limit)
    except UpstreamServiceError as exc:
        _fail(f"Search failed ({exc.stage}).", 1)

    table = Table(title=f"Results for {query!r}")
    table.add_column("ID", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Text")
    for r in results:
        table.add_row(r.id, f"{r.score:.4f}", r.text[:120])
    console.print(table)


@app.command()
def documents(
    limit: int = typer.Option(50, "--limit", "-n", min=1, help="Rows to show"),
    offset: int = typer.Option(0, "--offset", min=0, help="Rows to skip"),
) -> None:
    """List stored chunks, newest first."""
    docs = _pipeline().list_documents(limit=limit, offset=offset)

    table = Table(title=f"Documents ({len(docs)})")
    table.add_column("ID", style="cyan")
    table.add_column("Source")
    table.add_column("Chunk", justify="right")
    table.add_column("Created")
    table.add_column("Text")
    for d in docs:
        chunk = f"{d.metadata.chunk_index}/{d.metadata.total_chunks}" if d.metadata.total_chunks else ""
        table.add_row(d.id, d.metadata.source_filename or "", chunk, d.created_at, d.text[:80])
    console.print(table)


@app.command()
def delete(ids: Annotated[list[str], _DELETE_IDS]) -> None:
    """Delete stored chunks by ID."""
    deleted = _pipeline().delete_documents(ids)
    console.print(f"Deleted {deleted} of {len(ids)} requested chunks")


@app.command()
def stats() -> None:
    """Show store counts and index status."""
    info = _pipeline().stats()
    colour = "green" if info.status == "green" else "red"

    table = Table(title="Store")
    table.add_column("Metric", style="cyan")
    table.add_column("Value")
    table.add_row("Status", f"[{colour}]{info.status}[/]")
    table.add_row("Total", str(info.total))
    table.add_row("Vectors", str(info.vector_count))
    table.add_row("Indexed", str(info.indexed))
    for key, value in info.config.items():
        table.add_row(key, str(value))
    console.print(table)


@app.command()
def status() -> None:
    """Show configured and available components."""
    from docrag import __version__
    from docrag.embeddings.factory import available_providers as emb_providers
    from docrag.llm.factory import available_providers as llm_providers
    from docrag.vectorstore.factory import available_stores

    cfg = _settings()
    console.print(f"\n[bold green]docrag[/] v{__version__}\n")

    table = Table(title="Components")
    table.add_column("Layer", style="cyan")
    table.add_column("Configured")
    table.add_column("Available")
    table.add_row(
        "Embedding",
        f"{cfg.embedding.provider} ({cfg.embedding.model}, {cfg.embedding.dimension}d)",
        ", ".join(emb_providers()),
    )
    table.add_row("Vector store", cfg.vectorstore.backend, ", ".join(available_stores()))
    table.add_row("LLM", f"{cfg.llm.provider} ({cfg.llm.model})", ", ".join(llm_providers()))
    table.add_row(
        "Chunking",
        f"size {cfg.chunking.chunk_size}, overlap {cfg.chunking.overlap_size}",
        "",
    )
    table.add_row(
        "Retrieval",
        f"top {cfg.retrieval.max_sources}, threshold {cfg.retrieval.similarity_threshold}",
        "",
    )
    console.print(table)


if __name__ == "__main__":
    app()
