"""Exporter library: public API for election results export.

Provides format-specific writers and a unified export function.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from vote_desk.lib.exporter.csv_writer import DEFAULT_COLUMNS, write_csv
from vote_desk.lib.exporter.json_writer import write_json
from vote_desk.lib.exporter.text_writer import render_text_report, write_text
from vote_desk.schemas.results import ElectionResults

# Format registry mapping format names to writer functions
_WRITERS: dict[str, Callable[..., int]] = {
    "txt": write_text,
    "json": write_json,
    "csv": write_csv,
}

SUPPORTED_FORMATS = list(_WRITERS.keys())


@dataclass
class ExportResult:
    """Result of an export operation."""

    record_count: int
    output_path: Path
    file_size_bytes: int


def default_report_filename(election_id: str, output_format: str = "txt") -> str:
    """Return the conventional file name for an election report."""
    return f"election-report-{election_id}.{output_format}"


def export_results(
    results: ElectionResults,
    output_format: str,
    output_path: Path,
    *,
    generated_at: datetime,
) -> ExportResult:
    """Export election results to the specified format.

    Args:
        results: Ranked results snapshot.
        output_format: Output format (txt, json, csv).
        output_path: Path to write the output file. Parent directories are created.
        generated_at: Timestamp recorded in the export.

    Returns:
        ExportResult with record count and file info.

    Raises:
        ValueError: If the format is not supported.
    """
    if output_format not in _WRITERS:
        msg = f"Unsupported format: {output_format}. Supported: {SUPPORTED_FORMATS}"
        raise ValueError(msg)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    count = _WRITERS[output_format](output_path, results, generated_at=generated_at)
    file_size = output_path.stat().st_size

    return ExportResult(
        record_count=count,
        output_path=output_path,
        file_size_bytes=file_size,
    )


__all__ = [
    "DEFAULT_COLUMNS",
    "ExportResult",
    "SUPPORTED_FORMATS",
    "default_report_filename",
    "export_results",
    "render_text_report",
    "write_csv",
    "write_json",
    "write_text",
]
