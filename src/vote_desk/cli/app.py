"""Typer CLI root application."""

import typer

from vote_desk.core.config import get_settings
from vote_desk.core.logging import setup_logging

app = typer.Typer(name="vote-desk", help="In-memory election desk: voting, administration and results")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)


def _register_subcommands() -> None:
    """Register all CLI commands."""
    from vote_desk.cli.results_cmd import elections, report, results, stats
    from vote_desk.cli.shell_cmd import shell

    app.command("elections")(elections)
    app.command("results")(results)
    app.command("stats")(stats)
    app.command("report")(report)
    app.command("shell")(shell)


_register_subcommands()
