"""JSON export writer for election results."""

import json
from datetime import date, datetime
from pathlib import Path
from typing import Any

from vote_desk.schemas.results import ElectionResults


class _JSONEncoder(json.JSONEncoder):
    """Encoder handling dates and datetimes."""

    def default(self, o: object) -> Any:
        if isinstance(o, datetime):
            return o.isoformat()
        if isinstance(o, date):
            return o.isoformat()
        return super().default(o)


def write_json(output_path: Path, results: ElectionResults, *, generated_at: datetime) -> int:
    """Write election results to a JSON document.

    Args:
        output_path: Path to write the JSON file.
        results: Ranked results snapshot.
        generated_at: Export timestamp stored alongside the results.

    Returns:
        Number of candidates written.
    """
    document = {"generated_at": generated_at, **results.model_dump()}
    with output_path.open("w", encoding="utf-8") as f:
        json.dump(document, f, cls=_JSONEncoder, indent=2)
        f.write("\n")
    return len(results.candidates)
