"""Error taxonomy for store operations.

Every error derives from ``StoreError`` (itself a ``ValueError``) so callers
that only care about "the operation was rejected" can catch one type.
"""


class StoreError(ValueError):
    """Base class for rejected store operations."""


class NotFoundError(StoreError):
    """Raised when an election, candidate or voter id does not exist."""

    def __init__(self, kind: str, entity_id: str) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} '{entity_id}' not found")


class DuplicateVoterIdError(StoreError):
    """Raised when a voter login handle is already registered."""

    def __init__(self, voter_id: str) -> None:
        self.voter_id = voter_id
        super().__init__(f"Voter ID '{voter_id}' already exists")


class AlreadyVotedError(StoreError):
    """Raised when a voter attempts a second vote in the same election."""

    def __init__(self, voter_id: str, election_id: str) -> None:
        self.voter_id = voter_id
        self.election_id = election_id
        super().__init__(f"Voter '{voter_id}' has already voted in election '{election_id}'")


class SessionRequiredError(StoreError):
    """Raised when an operation needs an authenticated principal of a given kind."""

    def __init__(self, kind: str = "voter") -> None:
        self.kind = kind
        super().__init__(f"An authenticated {kind} session is required")


class InvalidCandidateForElectionError(StoreError):
    """Raised when a candidate id does not belong to the target election."""

    def __init__(self, candidate_id: str, election_id: str) -> None:
        self.candidate_id = candidate_id
        self.election_id = election_id
        super().__init__(f"Candidate '{candidate_id}' is not part of election '{election_id}'")


class ElectionClosedError(StoreError):
    """Raised when voting in an inactive election or outside its date window."""

    def __init__(self, election_id: str, reason: str) -> None:
        self.election_id = election_id
        self.reason = reason
        super().__init__(f"Election '{election_id}' is not open for voting: {reason}")


class ValidationFailedError(StoreError):
    """Raised when input data breaks a store-level validation rule."""


class AuthenticationError(StoreError):
    """Raised when credentials do not match any principal."""
