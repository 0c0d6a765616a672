"""Voter administration service.

Registers, updates and removes voters.  Voter login handles are only
checked for uniqueness in strict mode; otherwise login binds to the first
matching voter.
"""

from loguru import logger

from vote_desk.core.errors import DuplicateVoterIdError, ValidationFailedError
from vote_desk.core.security import hash_password
from vote_desk.core.state import StoreState
from vote_desk.models import Voter
from vote_desk.models.base import new_id
from vote_desk.schemas.voter import VoterCreate, VoterUpdate

_UPDATABLE_VOTER_FIELDS: frozenset[str] = frozenset({"voter_id", "name", "email"})


def _ensure_unique_voter_id(state: StoreState, voter_id: str, *, exclude: str | None = None) -> None:
    for voter in state.voters:
        if voter.voter_id == voter_id and voter.id != exclude:
            raise DuplicateVoterIdError(voter_id)


def list_voters(state: StoreState) -> list[Voter]:
    """Return all voters in registration order."""
    return list(state.voters)


def register_voter(state: StoreState, data: VoterCreate) -> Voter:
    """Register a new voter who has not voted yet.

    Args:
        state: The store state.
        data: Voter details and plaintext password.

    Returns:
        The created Voter.

    Raises:
        ValidationFailedError: In strict mode, if a field is blank.
        DuplicateVoterIdError: In strict mode, if the voter ID is taken.
    """
    if state.strict:
        if not all(v.strip() for v in (data.voter_id, data.name, data.email, data.password)):
            msg = "Voter ID, name, email and password are required"
            raise ValidationFailedError(msg)
        _ensure_unique_voter_id(state, data.voter_id)

    voter = Voter(
        id=new_id(),
        voter_id=data.voter_id,
        name=data.name,
        email=data.email,
        hashed_password=hash_password(data.password),
        has_voted=False,
    )
    state.voters.append(voter)
    logger.info(f"Registered voter {voter.voter_id} ({voter.id})")
    return voter


def update_voter(state: StoreState, voter_pk: str, updates: VoterUpdate) -> Voter:
    """Merge the provided fields into a voter. A new password is re-hashed.

    Raises:
        NotFoundError: If the voter does not exist.
        ValidationFailedError: In strict mode, if a provided field is blank.
        DuplicateVoterIdError: In strict mode, if the new voter ID is taken.
    """
    voter = state.get_voter(voter_pk)
    changes = {k: v for k, v in updates.model_dump(exclude_unset=True).items() if v is not None}

    if state.strict:
        if any(not str(v).strip() for v in changes.values()):
            msg = "Voter fields cannot be blank"
            raise ValidationFailedError(msg)
        if "voter_id" in changes:
            _ensure_unique_voter_id(state, changes["voter_id"], exclude=voter.id)

    for field, value in changes.items():
        if field in _UPDATABLE_VOTER_FIELDS:
            setattr(voter, field, value)
    if "password" in changes:
        voter.hashed_password = hash_password(changes["password"])

    logger.info(f"Updated voter {voter_pk}: {sorted(changes)}")
    return voter


def delete_voter(state: StoreState, voter_pk: str) -> Voter:
    """Remove a voter. Their vote records are kept in the log.

    Raises:
        NotFoundError: If the voter does not exist.
    """
    voter = state.get_voter(voter_pk)
    state.voters.remove(voter)
    logger.info(f"Deleted voter {voter.voter_id} ({voter_pk})")
    return voter
