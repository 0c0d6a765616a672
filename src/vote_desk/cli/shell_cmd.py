"""Interactive shell over a single in-memory store.

The shell is a thin view: it parses a command line, calls one store
operation and prints the outcome.  Admin-only commands are gated on the
current session, the way the admin dashboard is only shown to admins.
"""

import inspect
import shlex
from collections.abc import Callable
from pathlib import Path

import typer

from vote_desk.cli.render import format_candidates, format_election, format_results, format_stats
from vote_desk.core.errors import StoreError
from vote_desk.store import ElectionStore

_HELP = """Commands:
  login-voter VOTER_ID PASSWORD      log in as a voter
  login-admin USERNAME PASSWORD      log in as an administrator
  logout                             end the current session
  whoami                             show the current session
  elections                          list elections (voters see active ones)
  vote ELECTION_ID CANDIDATE_ID      cast a vote
  results [ELECTION_ID]              show ranked results
  report ELECTION_ID [FORMAT] [PATH] export a results report (admin)
  stats                              dashboard statistics (admin)
  toggle ELECTION_ID                 activate/deactivate an election (admin)
  register-voter VOTER_ID NAME EMAIL PASSWORD
                                     register a voter (admin)
  help                               show this help
  quit                               leave the shell"""


class ShellSession:
    """Command dispatcher bound to one store."""

    def __init__(self, store: ElectionStore) -> None:
        self.store = store
        self._commands: dict[str, tuple[Callable[..., None], bool]] = {
            "login-voter": (self.login_voter, False),
            "login-admin": (self.login_admin, False),
            "logout": (self.logout, False),
            "whoami": (self.whoami, False),
            "elections": (self.elections, False),
            "vote": (self.vote, False),
            "results": (self.results, False),
            "report": (self.report, True),
            "stats": (self.stats, True),
            "toggle": (self.toggle, True),
            "register-voter": (self.register_voter, True),
        }

    def run_line(self, line: str) -> bool:
        """Execute one command line.

        Returns:
            False when the shell should exit.
        """
        try:
            parts = shlex.split(line)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            return True
        if not parts:
            return True

        name, args = parts[0].lower(), parts[1:]
        if name in ("quit", "exit"):
            return False
        if name == "help":
            typer.echo(_HELP)
            return True
        if name not in self._commands:
            typer.echo(f"Unknown command '{name}'. Type 'help' for a list.", err=True)
            return True

        handler, admin_only = self._commands[name]
        if admin_only and self.store.current_user_type != "admin":
            typer.echo("Error: administrator login required", err=True)
            return True
        try:
            inspect.signature(handler).bind(*args)
        except TypeError:
            typer.echo(f"Error: wrong arguments for '{name}'. Type 'help' for usage.", err=True)
            return True
        try:
            handler(*args)
        except (StoreError, ValueError) as e:
            typer.echo(f"Error: {e}", err=True)
        return True

    def login_voter(self, voter_id: str, password: str) -> None:
        if self.store.login_voter(voter_id, password):
            typer.echo(f"Logged in as voter {self.store.current_session.display_name}")
        else:
            typer.echo("Login failed: invalid voter ID or password", err=True)

    def login_admin(self, username: str, password: str) -> None:
        if self.store.login_admin(username, password):
            typer.echo(f"Logged in as admin {username}")
        else:
            typer.echo("Login failed: invalid username or password", err=True)

    def logout(self) -> None:
        self.store.logout()
        typer.echo("Logged out")

    def whoami(self) -> None:
        session = self.store.current_session
        if not session.is_authenticated:
            typer.echo("Not logged in")
        else:
            typer.echo(f"{session.kind}: {session.display_name}")

    def elections(self) -> None:
        if self.store.current_user_type == "voter":
            available = self.store.get_voter_elections()
            if not available:
                typer.echo("No active elections")
            for election in available:
                typer.echo(format_election(election, voted=self.store.has_voter_voted(election.id)))
                for line in format_candidates(election):
                    typer.echo(line)
            return
        for election in self.store.list_elections():
            typer.echo(format_election(election))

    def vote(self, election_id: str, candidate_id: str) -> None:
        if self.store.current_user_type != "voter":
            typer.echo("Error: voter login required", err=True)
            return
        if self.store.cast_vote(election_id, candidate_id):
            typer.echo("Vote recorded")
        elif self.store.has_voter_voted(election_id):
            typer.echo("You have already voted in this election", err=True)
        else:
            typer.echo("Vote rejected", err=True)

    def results(self, election_id: str | None = None) -> None:
        if election_id is None:
            items = self.store.get_all_results()
        else:
            single = self.store.get_results(election_id)
            if single is None:
                typer.echo(f"Election '{election_id}' not found", err=True)
                return
            items = [single]
        for item in items:
            for line in format_results(item):
                typer.echo(line)

    def report(self, election_id: str, output_format: str = "txt", output: str | None = None) -> None:
        result = self.store.export_report(election_id, output_format, Path(output) if output else None)
        if result is None:
            typer.echo(f"Election '{election_id}' not found", err=True)
            return
        typer.echo(f"Report written: {result.output_path}")

    def stats(self) -> None:
        for line in format_stats(self.store.get_dashboard_stats()):
            typer.echo(line)

    def toggle(self, election_id: str) -> None:
        election = self.store.toggle_election_status(election_id)
        if election is None:
            typer.echo(f"Election '{election_id}' not found", err=True)
            return
        typer.echo(f"Election {election.id} is now {'active' if election.is_active else 'inactive'}")

    def register_voter(self, voter_id: str, name: str, email: str, password: str) -> None:
        if any(v.voter_id == voter_id for v in self.store.list_voters()):
            typer.echo(f"Error: voter ID '{voter_id}' already exists", err=True)
            return
        voter = self.store.register_voter({"voter_id": voter_id, "name": name, "email": email, "password": password})
        if voter is None:
            typer.echo("Error: voter could not be registered", err=True)
            return
        typer.echo(f"Registered voter {voter.voter_id} ({voter.name})")


def shell(
    strict: bool = typer.Option(False, "--strict", help="Enforce validation and report typed errors"),
) -> None:
    """Start an interactive session against a seeded in-memory store."""
    session = ShellSession(ElectionStore(strict=True if strict else None))
    typer.echo("vote-desk shell. Type 'help' for commands.")
    while True:
        try:
            line = typer.prompt("vote-desk", default="", show_default=False, prompt_suffix="> ")
        except typer.Abort:
            break
        if not session.run_line(line):
            break
    typer.echo("Bye")
