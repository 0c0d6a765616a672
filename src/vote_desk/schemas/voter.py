"""Pydantic v2 schemas for voter administration."""

from pydantic import BaseModel


class VoterCreate(BaseModel):
    """Data for registering a voter. The password is hashed before storage."""

    voter_id: str
    name: str
    email: str
    password: str


class VoterUpdate(BaseModel):
    """Partial voter update. Voting status is not writable here."""

    voter_id: str | None = None
    name: str | None = None
    email: str | None = None
    password: str | None = None


class VoterRead(BaseModel):
    """Voter snapshot without password material."""

    model_config = {"from_attributes": True}

    id: str
    voter_id: str
    name: str
    email: str
    has_voted: bool
    voted_election_id: str | None = None
