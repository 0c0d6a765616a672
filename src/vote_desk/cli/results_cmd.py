"""One-shot CLI commands over a freshly seeded store.

Each invocation builds its own in-memory store, so these commands only
ever see the demo data.
"""

from pathlib import Path

import typer

from vote_desk.cli.render import format_election, format_results, format_stats
from vote_desk.lib.exporter import SUPPORTED_FORMATS
from vote_desk.store import ElectionStore


def elections() -> None:
    """List all elections."""
    store = ElectionStore()
    for election in store.list_elections():
        typer.echo(format_election(election))


def results(
    election_id: str | None = typer.Option(None, "--election-id", help="Show a single election"),
) -> None:
    """Print ranked results."""
    store = ElectionStore()
    if election_id is None:
        all_results = store.get_all_results()
    else:
        single = store.get_results(election_id)
        if single is None:
            typer.echo(f"Error: election '{election_id}' not found", err=True)
            raise typer.Exit(code=1)
        all_results = [single]

    for item in all_results:
        for line in format_results(item):
            typer.echo(line)


def stats() -> None:
    """Print dashboard statistics."""
    store = ElectionStore()
    for line in format_stats(store.get_dashboard_stats()):
        typer.echo(line)


def report(
    election_id: str = typer.Argument(..., help="Election to report on"),
    output_format: str = typer.Option("txt", "--format", help=f"Output format ({', '.join(SUPPORTED_FORMATS)})"),
    output: Path | None = typer.Option(None, "--output", help="Output file (defaults to the export directory)"),
) -> None:
    """Export an election results report."""
    if output_format not in SUPPORTED_FORMATS:
        typer.echo(f"Error: unsupported format '{output_format}'", err=True)
        raise typer.Exit(code=1)

    store = ElectionStore()
    result = store.export_report(election_id, output_format, output)
    if result is None:
        typer.echo(f"Error: election '{election_id}' not found", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Report written: {result.output_path}")
    typer.echo(f"  Candidates: {result.record_count}")
    typer.echo(f"  File size:  {result.file_size_bytes} bytes")
