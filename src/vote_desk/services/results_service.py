"""Results service: read-only tallies, text reports and report export."""

from datetime import datetime
from pathlib import Path

from loguru import logger

from vote_desk.core.state import StoreState
from vote_desk.lib.exporter import ExportResult, export_results, render_text_report
from vote_desk.lib.tally import tally_election
from vote_desk.schemas.results import ElectionResults


def get_results(state: StoreState, election_id: str) -> ElectionResults:
    """Compute ranked results for one election.

    Raises:
        NotFoundError: If the election does not exist.
    """
    return tally_election(state.get_election(election_id))


def get_all_results(state: StoreState) -> list[ElectionResults]:
    """Compute ranked results for every election, in insertion order."""
    return [tally_election(e) for e in state.elections]


def generate_report(state: StoreState, election_id: str, generated_at: datetime) -> str:
    """Render the plain-text results report for one election.

    Raises:
        NotFoundError: If the election does not exist.
    """
    return render_text_report(get_results(state, election_id), generated_at)


def export_report(
    state: StoreState,
    election_id: str,
    output_format: str,
    output_path: Path,
    generated_at: datetime,
) -> ExportResult:
    """Write one election's results to disk.

    Raises:
        NotFoundError: If the election does not exist.
        ValueError: If the format is not supported.
    """
    results = get_results(state, election_id)
    result = export_results(results, output_format, output_path, generated_at=generated_at)
    logger.info(
        f"Exported {output_format} report for election {election_id} to {result.output_path} "
        f"({result.file_size_bytes} bytes)"
    )
    return result
