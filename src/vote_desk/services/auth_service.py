"""Authentication service.

Handles voter and admin login, logout, and session inspection.  Credentials
are compared against stored password hashes; a failed login never changes
the current session.
"""

from loguru import logger

from vote_desk.core.errors import AuthenticationError, SessionRequiredError
from vote_desk.core.security import verify_password
from vote_desk.core.state import StoreState
from vote_desk.models import ANONYMOUS, Admin, AdminSession, Anonymous, Voter, VoterSession
from vote_desk.schemas.auth import SessionRead


def authenticate_voter(state: StoreState, voter_id: str, password: str) -> Voter | None:
    """Find the first voter whose login handle and password both match.

    Args:
        state: The store state.
        voter_id: The voter's login handle (case-sensitive).
        password: The plaintext password.

    Returns:
        The matching Voter, or None.
    """
    for voter in state.voters:
        if voter.voter_id == voter_id and verify_password(password, voter.hashed_password):
            return voter
    return None


def authenticate_admin(state: StoreState, username: str, password: str) -> Admin | None:
    """Find the first admin whose username and password both match."""
    for admin in state.admins:
        if admin.username == username and verify_password(password, admin.hashed_password):
            return admin
    return None


def login_voter(state: StoreState, voter_id: str, password: str) -> Voter:
    """Authenticate a voter and make them the current principal.

    Any existing session is replaced.

    Raises:
        AuthenticationError: If no voter matches; the session is left untouched.
    """
    voter = authenticate_voter(state, voter_id, password)
    if voter is None:
        logger.warning(f"Failed voter login for '{voter_id}'")
        msg = "Invalid voter ID or password"
        raise AuthenticationError(msg)
    state.session = VoterSession(voter=voter)
    logger.info(f"Voter {voter.voter_id} logged in")
    return voter


def login_admin(state: StoreState, username: str, password: str) -> Admin:
    """Authenticate an admin and make them the current principal.

    Raises:
        AuthenticationError: If no admin matches; the session is left untouched.
    """
    admin = authenticate_admin(state, username, password)
    if admin is None:
        logger.warning(f"Failed admin login for '{username}'")
        msg = "Invalid username or password"
        raise AuthenticationError(msg)
    state.session = AdminSession(admin=admin)
    logger.info(f"Admin {admin.username} logged in")
    return admin


def logout(state: StoreState) -> bool:
    """Clear the session.

    Returns:
        True if a principal was logged out, False if the session was already empty.
    """
    was_authenticated = not isinstance(state.session, Anonymous)
    state.session = ANONYMOUS
    if was_authenticated:
        logger.info("Session cleared")
    return was_authenticated


def current_voter(state: StoreState) -> Voter:
    """Return the logged-in voter.

    Raises:
        SessionRequiredError: If no voter is logged in.
    """
    session = state.session
    if not isinstance(session, VoterSession):
        raise SessionRequiredError("voter")
    return session.voter


def describe_session(state: StoreState) -> SessionRead:
    """Build a read model of the current session."""
    session = state.session
    if isinstance(session, VoterSession):
        return SessionRead(kind="voter", principal_id=session.voter.id, display_name=session.voter.name)
    if isinstance(session, AdminSession):
        return SessionRead(kind="admin", principal_id=session.admin.id, display_name=session.admin.username)
    return SessionRead(kind="anonymous")
