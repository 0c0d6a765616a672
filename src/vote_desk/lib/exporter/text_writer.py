"""Plain-text election results report.

The layout is fixed so that a given results snapshot and timestamp always
produce the same bytes.
"""

from datetime import datetime
from pathlib import Path

from vote_desk.schemas.results import ElectionResults

REPORT_HEADER = "ELECTION RESULTS REPORT"
REPORT_RULE = "======================"
NO_VOTES_LINE = "No votes cast"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def render_text_report(results: ElectionResults, generated_at: datetime) -> str:
    """Render the human-readable report for one election.

    Args:
        results: Ranked results snapshot.
        generated_at: Timestamp printed on the ``Generated:`` line.

    Returns:
        The report text, newline-terminated.
    """
    lines = [
        REPORT_HEADER,
        REPORT_RULE,
        "",
        f"Election: {results.title}",
        f"Generated: {generated_at.strftime(TIMESTAMP_FORMAT)}",
        f"Total Votes: {results.total_votes}",
        "",
        "RESULTS:",
    ]
    lines.extend(
        f"{c.rank}. {c.name} ({c.party}) - {c.votes} votes ({c.percentage:.1f}%)" for c in results.candidates
    )
    lines.append("")
    if results.winner is not None and results.total_votes > 0:
        lines.append(f"Winner: {results.winner.name}")
    else:
        lines.append(f"Winner: {NO_VOTES_LINE}")
    return "\n".join(lines) + "\n"


def write_text(output_path: Path, results: ElectionResults, *, generated_at: datetime) -> int:
    """Write the text report to ``output_path``.

    Returns:
        Number of candidate lines written.
    """
    output_path.write_text(render_text_report(results, generated_at), encoding="utf-8")
    return len(results.candidates)
