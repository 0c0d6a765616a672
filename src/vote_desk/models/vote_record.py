"""Append-only vote log entry."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class VoteRecord:
    """Immutable fact linking one voter to one candidate in one election.

    ``voter_id`` is the voter's internal id, not the login handle.
    """

    voter_id: str
    candidate_id: str
    election_id: str
    timestamp: datetime
