"""Voter row."""

from dataclasses import dataclass


@dataclass
class Voter:
    """A registered voter; ``voter_id`` is the login handle, ``id`` the internal key."""

    id: str
    voter_id: str
    name: str
    email: str
    hashed_password: str
    has_voted: bool = False
    voted_election_id: str | None = None
