"""In-memory state container shared by the service layer.

``StoreState`` plays the role a database session plays elsewhere: every
service function receives it as its first argument and reads or mutates
the entity collections it holds.  Nothing here survives process exit.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from vote_desk.core.errors import NotFoundError
from vote_desk.models import ANONYMOUS, Admin, Election, Session, VoteRecord, Voter


def utc_now() -> datetime:
    """Return the current aware UTC time."""
    return datetime.now(UTC)


@dataclass
class StoreState:
    """Entity collections, the current session and the lock guarding them.

    Attributes:
        strict: When True, services enforce input validation and the
            facade lets typed errors propagate.
        clock: Source of "now" for vote timestamps and voting windows.
    """

    elections: list[Election] = field(default_factory=list)
    voters: list[Voter] = field(default_factory=list)
    admins: list[Admin] = field(default_factory=list)
    vote_records: list[VoteRecord] = field(default_factory=list)
    session: Session = ANONYMOUS
    strict: bool = False
    clock: Callable[[], datetime] = utc_now
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def find_election(self, election_id: str) -> Election | None:
        """Return the election with ``election_id`` or None."""
        return next((e for e in self.elections if e.id == election_id), None)

    def get_election(self, election_id: str) -> Election:
        """Return the election with ``election_id``.

        Raises:
            NotFoundError: If no such election exists.
        """
        election = self.find_election(election_id)
        if election is None:
            raise NotFoundError("Election", election_id)
        return election

    def find_voter(self, voter_pk: str) -> Voter | None:
        """Return the voter with internal id ``voter_pk`` or None."""
        return next((v for v in self.voters if v.id == voter_pk), None)

    def get_voter(self, voter_pk: str) -> Voter:
        """Return the voter with internal id ``voter_pk``.

        Raises:
            NotFoundError: If no such voter exists.
        """
        voter = self.find_voter(voter_pk)
        if voter is None:
            raise NotFoundError("Voter", voter_pk)
        return voter

    def has_record(self, voter_pk: str, election_id: str) -> bool:
        """Whether a vote record exists for the (voter, election) pair."""
        return any(r.voter_id == voter_pk and r.election_id == election_id for r in self.vote_records)
