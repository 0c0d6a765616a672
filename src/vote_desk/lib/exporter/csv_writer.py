"""CSV export writer for election results."""

import csv
from datetime import datetime
from pathlib import Path

from vote_desk.schemas.results import ElectionResults

# Characters that trigger formula execution in spreadsheet applications
_FORMULA_PREFIXES = ("=", "+", "-", "@", "\t", "\r")


def _sanitize_cell(value: object) -> object:
    """Sanitize a cell value to prevent CSV formula injection.

    Prefixes values starting with formula-triggering characters with
    a single quote to prevent execution in spreadsheet applications.

    Args:
        value: The cell value to sanitize.

    Returns:
        The sanitized value.
    """
    if isinstance(value, str) and value and value[0] in _FORMULA_PREFIXES:
        return f"'{value}"
    return value


DEFAULT_COLUMNS = [
    "election_id",
    "rank",
    "candidate_id",
    "name",
    "party",
    "votes",
    "percentage",
    "is_winner",
]


def write_csv(
    output_path: Path,
    results: ElectionResults,
    *,
    generated_at: datetime | None = None,
    columns: list[str] | None = None,
) -> int:
    """Write one row per ranked candidate.

    ``generated_at`` is accepted for writer-signature parity and not written.

    Args:
        output_path: Path to write the CSV file.
        results: Ranked results snapshot.
        generated_at: Unused.
        columns: Column names to include. Defaults to DEFAULT_COLUMNS.

    Returns:
        Number of rows written.
    """
    cols = columns or DEFAULT_COLUMNS
    winner_id = results.winner.id if results.winner is not None else None
    count = 0

    with output_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=cols, extrasaction="ignore")
        writer.writeheader()

        for candidate in results.candidates:
            row = {
                "election_id": results.election_id,
                "rank": candidate.rank,
                "candidate_id": candidate.id,
                "name": candidate.name,
                "party": candidate.party,
                "votes": candidate.votes,
                "percentage": f"{candidate.percentage:.1f}",
                "is_winner": candidate.id == winner_id,
            }
            writer.writerow({k: _sanitize_cell(v) for k, v in row.items()})
            count += 1

    return count
