"""Election service: election and candidate administration.

Unknown ids raise ``NotFoundError``; the store facade turns that into a
silent no-op unless it runs in strict mode.  Form-level validation
(required fields, at least two candidates) only applies when
``state.strict`` is set.
"""

from loguru import logger

from vote_desk.core.errors import NotFoundError, ValidationFailedError
from vote_desk.core.state import StoreState
from vote_desk.models import Candidate, Election
from vote_desk.models.base import new_id
from vote_desk.schemas.election import CandidateCreate, ElectionCreate, ElectionUpdate

MIN_CANDIDATES = 2

_UPDATABLE_ELECTION_FIELDS: frozenset[str] = frozenset({"title", "description", "is_active", "start_date", "end_date"})


def _validate_candidate(data: CandidateCreate) -> None:
    if not data.name.strip() or not data.party.strip():
        msg = "Candidate name and party are required"
        raise ValidationFailedError(msg)


def _validate_new_election(data: ElectionCreate) -> None:
    """Apply the create-election form rules."""
    if not data.title.strip() or not data.description.strip():
        msg = "Election title and description are required"
        raise ValidationFailedError(msg)
    if data.end_date < data.start_date:
        msg = "Election end date must not be before its start date"
        raise ValidationFailedError(msg)
    valid = [c for c in data.candidates if c.name.strip() and c.party.strip()]
    if len(valid) < MIN_CANDIDATES or len(valid) != len(data.candidates):
        msg = f"At least {MIN_CANDIDATES} candidates with a name and party are required"
        raise ValidationFailedError(msg)


def _new_candidate(data: CandidateCreate, taken_ids: set[str]) -> Candidate:
    candidate_id = new_id()
    while candidate_id in taken_ids:
        candidate_id = new_id()
    taken_ids.add(candidate_id)
    return Candidate(id=candidate_id, name=data.name, party=data.party, image=data.image)


def list_elections(state: StoreState) -> list[Election]:
    """Return all elections in insertion order."""
    return list(state.elections)


def active_elections(state: StoreState) -> list[Election]:
    """Return the elections open to voters, in insertion order."""
    return [e for e in state.elections if e.is_active]


def create_election(state: StoreState, data: ElectionCreate) -> Election:
    """Create an election with zeroed vote counts.

    Args:
        state: The store state.
        data: Election fields and initial candidates.

    Returns:
        The created Election.

    Raises:
        ValidationFailedError: In strict mode, if the form rules are broken.
    """
    if state.strict:
        _validate_new_election(data)

    taken: set[str] = set()
    election = Election(
        id=new_id(),
        title=data.title,
        description=data.description,
        start_date=data.start_date,
        end_date=data.end_date,
        is_active=data.is_active,
        candidates=[_new_candidate(c, taken) for c in data.candidates],
        total_votes=0,
    )
    state.elections.append(election)
    logger.info(f"Created election {election.id} '{election.title}' with {len(election.candidates)} candidates")
    return election


def update_election(state: StoreState, election_id: str, updates: ElectionUpdate) -> Election:
    """Merge the provided fields into an election.

    Raises:
        NotFoundError: If the election does not exist.
        ValidationFailedError: In strict mode, for a blank title or an inverted date window.
    """
    election = state.get_election(election_id)
    changes = updates.model_dump(exclude_unset=True)

    if state.strict:
        for field in ("title", "description"):
            if field in changes and (changes[field] is None or not changes[field].strip()):
                msg = f"Election {field} is required"
                raise ValidationFailedError(msg)
        start = changes.get("start_date") or election.start_date
        end = changes.get("end_date") or election.end_date
        if end < start:
            msg = "Election end date must not be before its start date"
            raise ValidationFailedError(msg)

    for field, value in changes.items():
        if field in _UPDATABLE_ELECTION_FIELDS and value is not None:
            setattr(election, field, value)

    logger.info(f"Updated election {election_id}: {sorted(changes)}")
    return election


def delete_election(state: StoreState, election_id: str) -> Election:
    """Remove an election. Its vote records are kept in the log.

    Raises:
        NotFoundError: If the election does not exist.
    """
    election = state.get_election(election_id)
    state.elections.remove(election)
    logger.info(f"Deleted election {election_id}")
    return election


def add_candidate(state: StoreState, election_id: str, data: CandidateCreate) -> Candidate:
    """Append a candidate with zero votes to an election.

    Raises:
        NotFoundError: If the election does not exist.
        ValidationFailedError: In strict mode, for a blank name or party.
    """
    election = state.get_election(election_id)
    if state.strict:
        _validate_candidate(data)

    candidate = _new_candidate(data, {c.id for c in election.candidates})
    election.candidates.append(candidate)
    logger.info(f"Added candidate {candidate.id} '{candidate.name}' to election {election_id}")
    return candidate


def remove_candidate(state: StoreState, election_id: str, candidate_id: str) -> Candidate:
    """Remove a candidate from an election.

    The candidate's votes leave the election total with it, so the total
    always equals the sum of the remaining candidates' votes.  Vote
    records naming the candidate stay in the log.

    Raises:
        NotFoundError: If the election or candidate does not exist.
    """
    election = state.get_election(election_id)
    candidate = election.find_candidate(candidate_id)
    if candidate is None:
        raise NotFoundError("Candidate", candidate_id)

    election.candidates.remove(candidate)
    election.total_votes -= candidate.votes
    if candidate.votes:
        logger.warning(
            f"Removed candidate {candidate_id} from election {election_id} with {candidate.votes} recorded votes"
        )
    else:
        logger.info(f"Removed candidate {candidate_id} from election {election_id}")
    return candidate


def toggle_election_status(state: StoreState, election_id: str) -> Election:
    """Flip an election between active and inactive.

    Raises:
        NotFoundError: If the election does not exist.
    """
    election = state.get_election(election_id)
    election.is_active = not election.is_active
    logger.info(f"Election {election_id} is now {'active' if election.is_active else 'inactive'}")
    return election
