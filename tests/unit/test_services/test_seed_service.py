"""Tests for the demo data seed."""

from datetime import date

from vote_desk.core.security import verify_password
from vote_desk.core.state import StoreState
from vote_desk.services.seed_service import demo_election, seed_demo_data


class TestSeedDemoData:
    """Tests for seed_demo_data."""

    def test_demo_election(self) -> None:
        election = demo_election()
        assert election.id == "1"
        assert election.title == "Presidential Election 2024"
        assert election.is_active is True
        assert (election.start_date, election.end_date) == (date(2024, 1, 1), date(2024, 12, 31))
        assert [(c.id, c.name, c.party, c.votes) for c in election.candidates] == [
            ("1", "John Smith", "Democratic Party", 0),
            ("2", "Jane Doe", "Republican Party", 0),
            ("3", "Bob Johnson", "Independent", 0),
        ]

    def test_seeds_admin_and_voters(self) -> None:
        state = StoreState()
        seed_demo_data(state)
        assert [a.username for a in state.admins] == ["admin"]
        assert verify_password("admin123", state.admins[0].hashed_password)
        assert [(v.id, v.voter_id, v.name) for v in state.voters] == [
            ("1", "V001", "Alice Cooper"),
            ("2", "V002", "Charlie Brown"),
        ]
        assert all(not v.has_voted for v in state.voters)
        assert state.vote_records == []

    def test_reseed_replaces_existing_data(self, state: StoreState) -> None:
        state.elections[0].total_votes = 5
        state.voters.clear()
        seed_demo_data(state)
        assert state.elections[0].total_votes == 0
        assert len(state.voters) == 2
