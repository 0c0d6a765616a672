"""Voting engine.

Each (voter, election) pair moves once from not-voted to voted; there is no
way back.  ``cast_vote`` must run while the caller holds ``state.lock`` so
the already-voted check and the commit see the same snapshot.
"""

from loguru import logger

from vote_desk.core.errors import (
    AlreadyVotedError,
    ElectionClosedError,
    InvalidCandidateForElectionError,
)
from vote_desk.core.state import StoreState
from vote_desk.models import Election, VoteRecord, VoterSession
from vote_desk.services.auth_service import current_voter
from vote_desk.services.election_service import active_elections


def _ensure_open(state: StoreState, election: Election) -> None:
    """Reject votes for inactive elections or outside the date window."""
    if not election.is_active:
        raise ElectionClosedError(election.id, "election is inactive")
    today = state.clock().date()
    if not election.is_open_on(today):
        window = f"{election.start_date}..{election.end_date}"
        raise ElectionClosedError(election.id, f"{today.isoformat()} is outside {window}")


def cast_vote(state: StoreState, election_id: str, candidate_id: str) -> VoteRecord:
    """Record the current voter's vote and update the tallies.

    Args:
        state: The store state. The caller must hold ``state.lock``.
        election_id: Target election.
        candidate_id: Chosen candidate within that election.

    Returns:
        The appended VoteRecord.

    Raises:
        SessionRequiredError: If no voter is logged in.
        AlreadyVotedError: If the voter already voted in this election.
        NotFoundError: If the election does not exist.
        InvalidCandidateForElectionError: If the candidate is not on this election's ballot.
        ElectionClosedError: In strict mode, if the election is inactive or out of its window.
    """
    voter = current_voter(state)
    if state.has_record(voter.id, election_id):
        logger.warning(f"Rejected duplicate vote by voter {voter.voter_id} in election {election_id}")
        raise AlreadyVotedError(voter.voter_id, election_id)

    election = state.get_election(election_id)
    candidate = election.find_candidate(candidate_id)
    if candidate is None:
        raise InvalidCandidateForElectionError(candidate_id, election_id)
    if state.strict:
        _ensure_open(state, election)

    record = VoteRecord(
        voter_id=voter.id,
        candidate_id=candidate_id,
        election_id=election_id,
        timestamp=state.clock(),
    )
    state.vote_records.append(record)
    candidate.votes += 1
    election.total_votes += 1
    voter.has_voted = True
    voter.voted_election_id = election_id

    logger.info(f"Voter {voter.voter_id} voted in election {election_id}")
    return record


def voter_elections(state: StoreState) -> list[Election]:
    """Return the elections a voter can see: the active ones, in insertion order."""
    return active_elections(state)


def has_voter_voted(state: StoreState, election_id: str) -> bool:
    """Whether the logged-in voter has a vote record for ``election_id``.

    Returns False when no voter is logged in.
    """
    session = state.session
    if not isinstance(session, VoterSession):
        return False
    return state.has_record(session.voter.id, election_id)


def list_vote_records(state: StoreState, election_id: str | None = None) -> list[VoteRecord]:
    """Return the vote log, optionally restricted to one election."""
    if election_id is None:
        return list(state.vote_records)
    return [r for r in state.vote_records if r.election_id == election_id]
