"""Tests for the ElectionStore facade."""

import threading
from datetime import date, datetime
from pathlib import Path

import pytest

from vote_desk.core.config import Settings
from vote_desk.core.errors import (
    AlreadyVotedError,
    AuthenticationError,
    DuplicateVoterIdError,
    InvalidCandidateForElectionError,
    NotFoundError,
    SessionRequiredError,
    ValidationFailedError,
)
from vote_desk.schemas.auth import AdminRead
from vote_desk.schemas.voter import VoterRead
from vote_desk.store import ElectionStore, StoreEvent

NEW_ELECTION = {
    "title": "City Council",
    "description": "Ward 3 seat",
    "candidates": [{"name": "Ann", "party": "Green"}, {"name": "Ben", "party": "Blue"}],
    "is_active": True,
    "start_date": "2024-05-01",
    "end_date": "2024-07-01",
}


class TestSeeding:
    """Tests for store construction."""

    def test_seeded_by_default(self, store: ElectionStore) -> None:
        assert [e.title for e in store.list_elections()] == ["Presidential Election 2024"]
        assert [v.voter_id for v in store.list_voters()] == ["V001", "V002"]
        assert [a.username for a in store.list_admins()] == ["admin"]
        assert store.current_user is None
        assert store.current_user_type is None

    def test_seed_disabled(self, empty_store: ElectionStore) -> None:
        assert empty_store.list_elections() == []
        assert empty_store.list_voters() == []

    def test_strict_from_settings(self, settings: Settings) -> None:
        settings.strict_mode = True
        assert ElectionStore(settings=settings).strict is True
        assert ElectionStore(settings=settings, strict=False).strict is False


class TestSessions:
    """Tests for login, logout and current user."""

    def test_voter_login(self, store: ElectionStore) -> None:
        assert store.login_voter("V001", "password123") is True
        assert store.current_user_type == "voter"
        user = store.current_user
        assert isinstance(user, VoterRead)
        assert user.name == "Alice Cooper"

    def test_admin_login(self, store: ElectionStore) -> None:
        assert store.login_admin("admin", "admin123") is True
        assert store.current_user_type == "admin"
        assert isinstance(store.current_user, AdminRead)

    def test_wrong_admin_password(self, store: ElectionStore) -> None:
        assert store.login_admin("admin", "wrongpass") is False
        assert store.current_user is None
        assert store.current_user_type is None

    def test_logout_idempotent(self, store: ElectionStore) -> None:
        store.login_voter("V001", "password123")
        store.logout()
        store.logout()
        assert store.current_user is None
        assert store.current_session.is_authenticated is False

    def test_strict_failed_login_raises(self, strict_store: ElectionStore) -> None:
        with pytest.raises(AuthenticationError):
            strict_store.login_voter("V001", "nope")
        assert strict_store.current_user is None


class TestVoting:
    """Tests for cast_vote and voter queries through the store."""

    def test_vote_then_duplicate(self, store: ElectionStore) -> None:
        store.login_voter("V001", "password123")
        assert store.cast_vote("1", "2") is True
        assert store.cast_vote("1", "1") is False

        election = store.get_election("1")
        assert election is not None
        assert [c.votes for c in election.candidates] == [0, 1, 0]
        assert election.total_votes == 1
        assert store.has_voter_voted("1") is True
        assert len(store.list_vote_records("1")) == 1

    def test_vote_without_session(self, store: ElectionStore) -> None:
        assert store.cast_vote("1", "2") is False
        assert store.list_vote_records() == []

    def test_vote_unknown_candidate(self, store: ElectionStore) -> None:
        store.login_voter("V001", "password123")
        assert store.cast_vote("1", "42") is False
        assert store.get_election("1").total_votes == 0  # type: ignore[union-attr]

    def test_strict_errors_propagate(self, strict_store: ElectionStore) -> None:
        with pytest.raises(SessionRequiredError):
            strict_store.cast_vote("1", "2")
        strict_store.login_voter("V001", "password123")
        with pytest.raises(InvalidCandidateForElectionError):
            strict_store.cast_vote("1", "42")
        assert strict_store.cast_vote("1", "2") is True
        with pytest.raises(AlreadyVotedError):
            strict_store.cast_vote("1", "1")

    def test_voter_elections_only_active(self, store: ElectionStore) -> None:
        store.create_election({**NEW_ELECTION, "is_active": False})
        assert [e.id for e in store.get_voter_elections()] == ["1"]

    def test_total_matches_candidate_sum(self, store: ElectionStore) -> None:
        store.login_voter("V001", "password123")
        store.cast_vote("1", "2")
        store.login_voter("V002", "password123")
        store.cast_vote("1", "3")
        store.remove_candidate("1", "3")
        election = store.get_election("1")
        assert election is not None
        assert election.total_votes == sum(c.votes for c in election.candidates) == 1

    def test_concurrent_double_submit_counts_once(self, store: ElectionStore) -> None:
        store.login_voter("V001", "password123")
        outcomes: list[bool] = []
        barrier = threading.Barrier(8)

        def submit() -> None:
            barrier.wait()
            outcomes.append(store.cast_vote("1", "2"))

        threads = [threading.Thread(target=submit) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert outcomes.count(True) == 1
        assert store.get_election("1").total_votes == 1  # type: ignore[union-attr]
        assert len(store.list_vote_records()) == 1


class TestElectionAdministration:
    """Tests for election and candidate operations."""

    def test_create_round_trip(self, store: ElectionStore) -> None:
        created = store.create_election(NEW_ELECTION)
        fetched = store.get_election(created.id)
        assert fetched == created
        assert fetched.title == "City Council"
        assert fetched.start_date == date(2024, 5, 1)
        assert fetched.total_votes == 0
        assert [c.votes for c in fetched.candidates] == [0, 0]

    def test_unknown_ids_are_noops(self, store: ElectionStore) -> None:
        before = store.list_elections()
        assert store.update_election("missing", {"title": "x"}) is None
        assert store.delete_election("missing") is False
        assert store.toggle_election_status("missing") is None
        assert store.add_candidate("missing", {"name": "A", "party": "B"}) is None
        assert store.remove_candidate("1", "missing") is False
        assert store.list_elections() == before

    def test_strict_unknown_id_raises(self, strict_store: ElectionStore) -> None:
        with pytest.raises(NotFoundError):
            strict_store.update_election("missing", {"title": "x"})

    def test_strict_create_validates(self, strict_store: ElectionStore) -> None:
        with pytest.raises(ValidationFailedError):
            strict_store.create_election({**NEW_ELECTION, "candidates": [{"name": "Ann", "party": "Green"}]})
        assert len(strict_store.list_elections()) == 1

    def test_update_and_toggle(self, store: ElectionStore) -> None:
        updated = store.update_election("1", {"title": "Renamed"})
        assert updated is not None
        assert updated.title == "Renamed"
        assert store.toggle_election_status("1").is_active is False  # type: ignore[union-attr]
        assert store.toggle_election_status("1").is_active is True  # type: ignore[union-attr]

    def test_add_and_remove_candidate(self, store: ElectionStore) -> None:
        candidate = store.add_candidate("1", {"name": "Dana", "party": "Libertarian"})
        assert candidate is not None
        assert candidate.votes == 0
        assert store.remove_candidate("1", candidate.id) is True
        assert [c.id for c in store.get_election("1").candidates] == ["1", "2", "3"]  # type: ignore[union-attr]

    def test_delete_keeps_vote_records(self, store: ElectionStore) -> None:
        store.login_voter("V001", "password123")
        store.cast_vote("1", "2")
        assert store.delete_election("1") is True
        assert store.get_election("1") is None
        assert store.get_results("1") is None
        assert len(store.list_vote_records()) == 1

    def test_snapshots_are_isolated(self, store: ElectionStore) -> None:
        snapshot = store.get_election("1")
        assert snapshot is not None
        snapshot.title = "Mutated"
        snapshot.candidates[0].votes = 100
        fresh = store.get_election("1")
        assert fresh.title == "Presidential Election 2024"  # type: ignore[union-attr]
        assert fresh.candidates[0].votes == 0  # type: ignore[union-attr]


class TestVoterAdministration:
    """Tests for voter operations."""

    def test_register_update_delete(self, store: ElectionStore) -> None:
        voter = store.register_voter(
            {"voter_id": "V003", "name": "Dana", "email": "dana@example.com", "password": "pw"}
        )
        assert voter is not None
        assert voter.has_voted is False
        assert store.login_voter("V003", "pw") is True

        updated = store.update_voter(voter.id, {"name": "Dana Scully"})
        assert updated is not None
        assert updated.name == "Dana Scully"
        assert store.delete_voter(voter.id) is True
        assert store.get_voter(voter.id) is None

    def test_unknown_voter_noops(self, store: ElectionStore) -> None:
        assert store.update_voter("missing", {"name": "x"}) is None
        assert store.delete_voter("missing") is False

    def test_strict_duplicate_voter_id(self, strict_store: ElectionStore) -> None:
        with pytest.raises(DuplicateVoterIdError, match="already exists"):
            strict_store.register_voter(
                {"voter_id": "V001", "name": "X", "email": "x@example.com", "password": "pw"}
            )


class TestResultsAndReports:
    """Tests for results, reports, exports and stats."""

    def test_report_after_one_vote(self, store: ElectionStore) -> None:
        store.login_voter("V001", "password123")
        store.cast_vote("1", "2")
        report = store.generate_report("1")
        assert report is not None
        assert "Generated: 2024-06-01 12:30:00" in report
        assert "Total Votes: 1" in report
        assert "1. Jane Doe (Republican Party) - 1 votes (100.0%)" in report
        assert "Winner: Jane Doe" in report

    def test_report_unknown_election(self, store: ElectionStore) -> None:
        assert store.generate_report("missing") is None

    def test_report_explicit_timestamp(self, store: ElectionStore) -> None:
        report = store.generate_report("1", generated_at=datetime(2025, 1, 2, 3, 4, 5))
        assert "Generated: 2025-01-02 03:04:05" in report  # type: ignore[operator]

    def test_export_default_path(self, store: ElectionStore, settings: Settings) -> None:
        result = store.export_report("1")
        assert result is not None
        assert result.output_path == Path(settings.export_dir) / "election-report-1.txt"
        assert result.output_path.read_text().startswith("ELECTION RESULTS REPORT\n")

    def test_export_json(self, store: ElectionStore, tmp_path: Path) -> None:
        result = store.export_report("1", "json", tmp_path / "r.json")
        assert result is not None
        assert result.record_count == 3

    def test_export_bad_format(self, store: ElectionStore, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Unsupported format"):
            store.export_report("1", "pdf", tmp_path / "r.pdf")

    def test_results_and_stats(self, store: ElectionStore) -> None:
        store.login_voter("V002", "password123")
        store.cast_vote("1", "3")
        results = store.get_results("1")
        assert results is not None
        assert results.winner is not None
        assert results.winner.name == "Bob Johnson"
        assert [r.election_id for r in store.get_all_results()] == ["1"]
        stats = store.get_dashboard_stats()
        assert (stats.total_elections, stats.active_elections, stats.total_voters, stats.total_votes) == (1, 1, 2, 1)


class TestSubscribers:
    """Tests for change notifications."""

    def test_events_follow_successful_operations(self, store: ElectionStore) -> None:
        events: list[StoreEvent] = []
        store.subscribe(events.append)

        store.login_voter("V001", "password123")
        store.cast_vote("1", "2")
        store.cast_vote("1", "1")
        store.logout()
        store.logout()

        assert [e.name for e in events] == ["login", "vote_cast", "logout"]
        assert events[1].entity_id == "1"

    def test_unsubscribe(self, store: ElectionStore) -> None:
        events: list[StoreEvent] = []
        unsubscribe = store.subscribe(events.append)
        unsubscribe()
        unsubscribe()
        store.toggle_election_status("1")
        assert events == []

    def test_failing_subscriber_does_not_break_store(self, store: ElectionStore) -> None:
        events: list[StoreEvent] = []

        def broken(event: StoreEvent) -> None:
            raise RuntimeError("boom")

        store.subscribe(broken)
        store.subscribe(events.append)
        assert store.toggle_election_status("1") is not None
        assert [e.name for e in events] == ["election_updated"]

    def test_subscriber_can_read_store(self, store: ElectionStore) -> None:
        seen: list[int] = []
        store.subscribe(lambda event: seen.append(store.get_dashboard_stats().total_votes))
        store.login_voter("V001", "password123")
        store.cast_vote("1", "2")
        assert seen == [0, 1]
