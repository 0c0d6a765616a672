"""Election and candidate rows.

A candidate is owned by exactly one election; its id only needs to be
unique within that election's candidate list.
"""

from dataclasses import dataclass, field
from datetime import date

DEFAULT_CANDIDATE_IMAGE = "/placeholder.svg"


@dataclass
class Candidate:
    """One option on an election ballot with its running vote count."""

    id: str
    name: str
    party: str
    image: str = DEFAULT_CANDIDATE_IMAGE
    votes: int = 0


@dataclass
class Election:
    """A named contest with an ordered candidate list and a date window."""

    id: str
    title: str
    description: str
    start_date: date
    end_date: date
    is_active: bool = True
    candidates: list[Candidate] = field(default_factory=list)
    total_votes: int = 0

    def find_candidate(self, candidate_id: str) -> Candidate | None:
        """Return the candidate with ``candidate_id`` or None."""
        return next((c for c in self.candidates if c.id == candidate_id), None)

    def is_open_on(self, day: date) -> bool:
        """Whether ``day`` falls inside the inclusive voting window."""
        return self.start_date <= day <= self.end_date
