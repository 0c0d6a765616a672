"""Election store facade.

``ElectionStore`` owns one ``StoreState`` and is the only way to read or
change it.  Every operation runs under the state's re-entrant lock, returns
Pydantic snapshots instead of live rows, and notifies subscribers once the
lock is released.

Two error modes are supported:

* lenient (default): unknown ids are silent no-ops, failed logins and
  double votes return False.
* strict: the typed errors from ``vote_desk.core.errors`` propagate and the
  services enforce input validation.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, TypeVar

from loguru import logger
from pydantic import BaseModel

from vote_desk.core.config import Settings, get_settings
from vote_desk.core.errors import StoreError
from vote_desk.core.state import StoreState, utc_now
from vote_desk.lib.exporter import ExportResult, default_report_filename
from vote_desk.models import AdminSession, VoterSession
from vote_desk.schemas.auth import AdminRead, SessionRead
from vote_desk.schemas.election import CandidateCreate, CandidateRead, ElectionCreate, ElectionRead, ElectionUpdate
from vote_desk.schemas.results import DashboardStats, ElectionResults
from vote_desk.schemas.vote import VoteRecordRead
from vote_desk.schemas.voter import VoterCreate, VoterRead, VoterUpdate
from vote_desk.services import (
    auth_service,
    election_service,
    results_service,
    seed_service,
    stats_service,
    voter_service,
    voting_service,
)

_SchemaT = TypeVar("_SchemaT", bound=BaseModel)
_T = TypeVar("_T")


@dataclass(frozen=True)
class StoreEvent:
    """Notification sent to subscribers after a state change."""

    name: str
    entity_id: str | None = None


Subscriber = Callable[[StoreEvent], None]


def _coerce(schema: type[_SchemaT], data: _SchemaT | Mapping[str, Any]) -> _SchemaT:
    if isinstance(data, schema):
        return data
    return schema.model_validate(data)


class ElectionStore:
    """In-memory election store with voter and admin operations.

    Args:
        settings: Application settings; read from the environment when omitted.
        strict: Overrides ``settings.strict_mode``.
        seed: Overrides ``settings.seed_demo_data``.
        clock: Source of "now" for vote timestamps, voting windows and reports.
    """

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        strict: bool | None = None,
        seed: bool | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._state = StoreState(
            strict=self._settings.strict_mode if strict is None else strict,
            clock=clock or utc_now,
        )
        self._subscribers: list[Subscriber] = []
        if self._settings.seed_demo_data if seed is None else seed:
            seed_service.seed_demo_data(self._state)

    @property
    def strict(self) -> bool:
        return self._state.strict

    # --- Internals ---

    def _execute(
        self,
        operation: Callable[..., _T],
        *args: Any,
        event: str | None = None,
        entity_id: str | None = None,
    ) -> _T | None:
        """Run a service call under the lock, translating rejections in lenient mode.

        Returns the service result, or None if a ``StoreError`` was swallowed.
        """
        with self._state.lock:
            try:
                result = operation(self._state, *args)
            except StoreError as exc:
                if self._state.strict:
                    raise
                logger.info(f"{operation.__name__} rejected: {exc}")
                return None
        if event is not None:
            self._notify(StoreEvent(name=event, entity_id=entity_id))
        return result

    def _query(self, operation: Callable[..., _T], *args: Any) -> _T | None:
        """Run a read-only service call; missing entities yield None in every mode."""
        with self._state.lock:
            try:
                return operation(self._state, *args)
            except StoreError:
                return None

    def _notify(self, event: StoreEvent) -> None:
        for subscriber in list(self._subscribers):
            try:
                subscriber(event)
            except Exception:
                logger.exception(f"Subscriber failed while handling {event.name}")

    # --- Subscriptions ---

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` for state-change events.

        Returns:
            A function that removes the subscription. Calling it twice is harmless.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # --- Session / authentication ---

    def login_voter(self, voter_id: str, password: str) -> bool:
        """Log in a voter by login handle and password. Replaces any current session."""
        voter = self._execute(auth_service.login_voter, voter_id, password, event="login")
        return voter is not None

    def login_admin(self, username: str, password: str) -> bool:
        """Log in an admin by username and password. Replaces any current session."""
        admin = self._execute(auth_service.login_admin, username, password, event="login")
        return admin is not None

    def logout(self) -> None:
        """Clear the session. Always succeeds."""
        with self._state.lock:
            changed = auth_service.logout(self._state)
        if changed:
            self._notify(StoreEvent(name="logout"))

    @property
    def current_session(self) -> SessionRead:
        with self._state.lock:
            return auth_service.describe_session(self._state)

    @property
    def current_user(self) -> VoterRead | AdminRead | None:
        """The logged-in voter or admin, or None."""
        with self._state.lock:
            session = self._state.session
            if isinstance(session, VoterSession):
                return VoterRead.model_validate(session.voter)
            if isinstance(session, AdminSession):
                return AdminRead.model_validate(session.admin)
            return None

    @property
    def current_user_type(self) -> str | None:
        """``"voter"``, ``"admin"`` or None."""
        kind = self.current_session.kind
        return None if kind == "anonymous" else kind

    # --- Election administration ---

    def list_elections(self) -> list[ElectionRead]:
        with self._state.lock:
            return [ElectionRead.model_validate(e) for e in self._state.elections]

    def get_election(self, election_id: str) -> ElectionRead | None:
        election = self._query(StoreState.get_election, election_id)
        return ElectionRead.model_validate(election) if election is not None else None

    def create_election(self, data: ElectionCreate | Mapping[str, Any]) -> ElectionRead:
        """Create an election; ids are assigned and all vote counts start at zero."""
        request = _coerce(ElectionCreate, data)
        with self._state.lock:
            election = election_service.create_election(self._state, request)
            snapshot = ElectionRead.model_validate(election)
        self._notify(StoreEvent(name="election_created", entity_id=snapshot.id))
        return snapshot

    def update_election(self, election_id: str, updates: ElectionUpdate | Mapping[str, Any]) -> ElectionRead | None:
        """Merge title, description, status and dates. Unknown id is a no-op."""
        request = _coerce(ElectionUpdate, updates)
        election = self._execute(
            election_service.update_election, election_id, request, event="election_updated", entity_id=election_id
        )
        return ElectionRead.model_validate(election) if election is not None else None

    def delete_election(self, election_id: str) -> bool:
        """Remove an election. Unknown id is a no-op."""
        removed = self._execute(
            election_service.delete_election, election_id, event="election_deleted", entity_id=election_id
        )
        return removed is not None

    def add_candidate(self, election_id: str, data: CandidateCreate | Mapping[str, Any]) -> CandidateRead | None:
        """Append a candidate with zero votes. Unknown election is a no-op."""
        request = _coerce(CandidateCreate, data)
        candidate = self._execute(
            election_service.add_candidate, election_id, request, event="candidate_added", entity_id=election_id
        )
        return CandidateRead.model_validate(candidate) if candidate is not None else None

    def remove_candidate(self, election_id: str, candidate_id: str) -> bool:
        """Remove a candidate from an election. Unknown ids are a no-op."""
        removed = self._execute(
            election_service.remove_candidate,
            election_id,
            candidate_id,
            event="candidate_removed",
            entity_id=election_id,
        )
        return removed is not None

    def toggle_election_status(self, election_id: str) -> ElectionRead | None:
        """Flip an election's active flag. Unknown id is a no-op."""
        election = self._execute(
            election_service.toggle_election_status, election_id, event="election_updated", entity_id=election_id
        )
        return ElectionRead.model_validate(election) if election is not None else None

    # --- Voter administration ---

    def list_voters(self) -> list[VoterRead]:
        with self._state.lock:
            return [VoterRead.model_validate(v) for v in self._state.voters]

    def get_voter(self, voter_pk: str) -> VoterRead | None:
        voter = self._query(StoreState.get_voter, voter_pk)
        return VoterRead.model_validate(voter) if voter is not None else None

    def list_admins(self) -> list[AdminRead]:
        with self._state.lock:
            return [AdminRead.model_validate(a) for a in self._state.admins]

    def register_voter(self, data: VoterCreate | Mapping[str, Any]) -> VoterRead | None:
        """Register a voter. Returns None only when strict-mode validation is swallowed."""
        request = _coerce(VoterCreate, data)
        voter = self._execute(voter_service.register_voter, request, event="voter_registered")
        return VoterRead.model_validate(voter) if voter is not None else None

    def update_voter(self, voter_pk: str, updates: VoterUpdate | Mapping[str, Any]) -> VoterRead | None:
        """Merge voter fields by internal id. Unknown id is a no-op."""
        request = _coerce(VoterUpdate, updates)
        voter = self._execute(voter_service.update_voter, voter_pk, request, event="voter_updated", entity_id=voter_pk)
        return VoterRead.model_validate(voter) if voter is not None else None

    def delete_voter(self, voter_pk: str) -> bool:
        """Remove a voter by internal id. Unknown id is a no-op."""
        removed = self._execute(voter_service.delete_voter, voter_pk, event="voter_deleted", entity_id=voter_pk)
        return removed is not None

    # --- Voting ---

    def cast_vote(self, election_id: str, candidate_id: str) -> bool:
        """Cast the logged-in voter's vote.

        Returns:
            True if the vote was recorded; False if there is no voter session,
            the voter already voted in this election, or the election or
            candidate does not exist.
        """
        record = self._execute(
            voting_service.cast_vote, election_id, candidate_id, event="vote_cast", entity_id=election_id
        )
        return record is not None

    def get_voter_elections(self) -> list[ElectionRead]:
        """Active elections in insertion order."""
        with self._state.lock:
            return [ElectionRead.model_validate(e) for e in voting_service.voter_elections(self._state)]

    def has_voter_voted(self, election_id: str) -> bool:
        with self._state.lock:
            return voting_service.has_voter_voted(self._state, election_id)

    def list_vote_records(self, election_id: str | None = None) -> list[VoteRecordRead]:
        with self._state.lock:
            records = voting_service.list_vote_records(self._state, election_id)
            return [VoteRecordRead.model_validate(r) for r in records]

    # --- Results ---

    def get_results(self, election_id: str) -> ElectionResults | None:
        return self._query(results_service.get_results, election_id)

    def get_all_results(self) -> list[ElectionResults]:
        with self._state.lock:
            return results_service.get_all_results(self._state)

    def generate_report(self, election_id: str, generated_at: datetime | None = None) -> str | None:
        """Render the text report, or None for an unknown election."""
        return self._query(results_service.generate_report, election_id, generated_at or self._state.clock())

    def export_report(
        self,
        election_id: str,
        output_format: str = "txt",
        output_path: Path | None = None,
        generated_at: datetime | None = None,
    ) -> ExportResult | None:
        """Write a results report to disk.

        The default path is ``{export_dir}/election-report-{election_id}.{format}``.

        Returns:
            The export result, or None for an unknown election.

        Raises:
            ValueError: If the format is not supported.
        """
        path = output_path or Path(self._settings.export_dir) / default_report_filename(election_id, output_format)
        return self._query(
            results_service.export_report, election_id, output_format, path, generated_at or self._state.clock()
        )

    def get_dashboard_stats(self) -> DashboardStats:
        with self._state.lock:
            return stats_service.dashboard_stats(self._state)
