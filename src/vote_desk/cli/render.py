"""Plain-text rendering of store snapshots for the CLI."""

from vote_desk.schemas.election import ElectionRead
from vote_desk.schemas.results import DashboardStats, ElectionResults


def format_election(election: ElectionRead, *, voted: bool | None = None) -> str:
    """One summary line for an election."""
    status = "active" if election.is_active else "inactive"
    line = (
        f"[{election.id}] {election.title} ({status}, {election.start_date} to {election.end_date}, "
        f"{len(election.candidates)} candidates, {election.total_votes} votes)"
    )
    if voted:
        line += " - voted"
    return line


def format_candidates(election: ElectionRead) -> list[str]:
    """Ballot lines for an election, in ballot order."""
    return [f"    {c.id}: {c.name} ({c.party})" for c in election.candidates]


def format_results(results: ElectionResults) -> list[str]:
    """Ranked result lines with a winner marker."""
    status = "Active" if results.is_active else "Completed"
    lines = [f"{results.title} [{status}] - {results.total_votes} total votes"]
    for c in results.candidates:
        marker = "  <- winner" if results.winner is not None and c.id == results.winner.id else ""
        lines.append(f"  {c.rank}. {c.name} ({c.party}) {c.votes} votes {c.percentage:.1f}%{marker}")
    if results.winner is None:
        lines.append("  No votes")
    return lines


def format_stats(stats: DashboardStats) -> list[str]:
    """Admin dashboard counters."""
    return [
        f"Elections:       {stats.total_elections} ({stats.active_elections} active)",
        f"Voters:          {stats.total_voters}",
        f"Votes cast:      {stats.total_votes}",
    ]
