"""Pydantic v2 schemas for elections and candidates.

Request schemas are structural only: business rules (minimum candidate
count, non-blank names) are enforced by the election service in strict
mode.
"""

from datetime import date

from pydantic import BaseModel, Field

from vote_desk.models.election import DEFAULT_CANDIDATE_IMAGE

# --- Request schemas ---


class CandidateCreate(BaseModel):
    """A candidate to add to an election. Id and vote count are assigned by the store."""

    name: str
    party: str
    image: str = DEFAULT_CANDIDATE_IMAGE


class ElectionCreate(BaseModel):
    """Data for a new election. Id and vote totals are assigned by the store."""

    title: str
    description: str = ""
    candidates: list[CandidateCreate] = Field(default_factory=list)
    is_active: bool = True
    start_date: date
    end_date: date


class ElectionUpdate(BaseModel):
    """Partial election update.

    The candidate list and vote totals only change through candidate
    operations and vote casting.
    """

    title: str | None = None
    description: str | None = None
    is_active: bool | None = None
    start_date: date | None = None
    end_date: date | None = None


# --- Response schemas ---


class CandidateRead(BaseModel):
    """Candidate snapshot."""

    model_config = {"from_attributes": True}

    id: str
    name: str
    party: str
    image: str
    votes: int


class ElectionRead(BaseModel):
    """Election snapshot including its candidates."""

    model_config = {"from_attributes": True}

    id: str
    title: str
    description: str
    candidates: list[CandidateRead]
    is_active: bool
    start_date: date
    end_date: date
    total_votes: int
