"""Results and dashboard read models."""

from datetime import date

from pydantic import BaseModel, Field


class RankedCandidate(BaseModel):
    """A candidate's position in the election results."""

    rank: int = Field(ge=1, description="1-based position after sorting by votes")
    id: str
    name: str
    party: str
    image: str
    votes: int
    percentage: float = Field(description="Share of total votes, 0-100; 0.0 when no votes were cast")


class ElectionResults(BaseModel):
    """Ranked results for one election."""

    election_id: str
    title: str
    is_active: bool
    start_date: date
    end_date: date
    total_votes: int
    candidates: list[RankedCandidate]
    winner: RankedCandidate | None = Field(
        default=None,
        description="Top-ranked candidate, or None when no votes were cast",
    )


class DashboardStats(BaseModel):
    """Aggregate counters shown on the admin dashboard."""

    total_elections: int
    active_elections: int
    total_voters: int
    total_votes: int
