"""chipscan CLI."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from chipscan.acquisition import acquire_document, acquire_file
from chipscan.config import settings
from chipscan.exceptions import AcquisitionFailure, ChipScanError
from chipscan.logging_utils import LogLevel, setup_logging
from chipscan.models import DocumentSnapshot
from chipscan.pipeline import ConsoleReporter, classify, records_to_json, summarize

app = typer.Typer(
    name="chipscan",
    help="Locate and classify chips (dropdowns, rich links, inline objects, mentions) in Google Docs",
    add_completion=False,
)
console = Console()


def _fail(error: ChipScanError) -> None:
    """Report a terminal error and exit non-zero."""
    console.print(f"[bold red]Error:[/bold red] {escape(str(error))}", highlight=False)
    if isinstance(error, AcquisitionFailure) and error.hint:
        console.print(f"[yellow]{escape(error.hint)}[/yellow]", highlight=False)
    raise typer.Exit(code=1)


def _report(snapshot: DocumentSnapshot, as_json: bool, keep_blank_text: bool) -> None:
    records = classify(
        snapshot.content,
        snapshot.inline_objects,
        keep_blank_text=keep_blank_text or settings.keep_blank_text,
    )

    if as_json:
        typer.echo(records_to_json(records, indent=settings.json_indent))
        return

    reporter = ConsoleReporter(console, json_indent=settings.json_indent)
    console.print(f"[bold blue]Document:[/bold blue] {escape(snapshot.title or '(untitled)')}")
    console.print(f"[dim]Document ID: {escape(snapshot.document_id)}[/dim]")
    console.print()

    rendered = reporter.render_records(records)

    if snapshot.inline_objects:
        console.print()
        reporter.render_inline_objects(snapshot.inline_objects)

    console.print()
    reporter.render_summary(summarize(rendered))


@app.callback()
def main(
    log_level: Optional[LogLevel] = typer.Option(
        None,
        case_sensitive=False,
        help="Logging level (default from CHIPSCAN_LOG_LEVEL)",
    ),
) -> None:
    """Configure logging before any command runs."""
    setup_logging(log_level.value if log_level else settings.log_level)


@app.command()
def inspect(
    document_id: str = typer.Argument(..., help="Google Docs document ID"),
    token: Optional[str] = typer.Option(None, help="OAuth access token"),
    as_json: bool = typer.Option(False, "--json", help="Dump records as JSON"),
    keep_blank_text: bool = typer.Option(
        False, "--keep-blank-text", help="Report whitespace-only text runs"
    ),
) -> None:
    """Fetch a document from the Docs API and classify its content."""
    try:
        snapshot = acquire_document(document_id, access_token=token)
    except ChipScanError as e:
        _fail(e)
    _report(snapshot, as_json, keep_blank_text)


@app.command("inspect-file")
def inspect_file(
    path: Path = typer.Argument(..., help="Saved documents.get JSON response"),
    as_json: bool = typer.Option(False, "--json", help="Dump records as JSON"),
    keep_blank_text: bool = typer.Option(
        False, "--keep-blank-text", help="Report whitespace-only text runs"
    ),
) -> None:
    """Classify the content of a saved document resource."""
    try:
        snapshot = acquire_file(path)
    except ChipScanError as e:
        _fail(e)
    _report(snapshot, as_json, keep_blank_text)


@app.command()
def objects(
    source: str = typer.Argument(..., help="Document ID, or a JSON path with --file"),
    from_file: bool = typer.Option(False, "--file", help="Treat SOURCE as a JSON file"),
    token: Optional[str] = typer.Option(None, help="OAuth access token"),
) -> None:
    """List the inline objects of a document (dropdown candidates)."""
    try:
        if from_file:
            snapshot = acquire_file(source)
        else:
            snapshot = acquire_document(source, access_token=token)
    except ChipScanError as e:
        _fail(e)

    ConsoleReporter(console, json_indent=settings.json_indent).render_inline_objects(
        snapshot.inline_objects
    )


if __name__ == "__main__":
    app()
