"""Demo data loaded into a fresh store.

One election with three candidates, one admin and two voters, no votes.
"""

from datetime import date

from loguru import logger

from vote_desk.core.security import hash_password
from vote_desk.core.state import StoreState
from vote_desk.models import Admin, Candidate, Election, Voter

DEMO_ADMIN_PASSWORD = "admin123"  # noqa: S105
DEMO_VOTER_PASSWORD = "password123"  # noqa: S105


def demo_election() -> Election:
    """Build the seeded presidential election."""
    return Election(
        id="1",
        title="Presidential Election 2024",
        description="Election for President of the Republic",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 12, 31),
        is_active=True,
        candidates=[
            Candidate(id="1", name="John Smith", party="Democratic Party"),
            Candidate(id="2", name="Jane Doe", party="Republican Party"),
            Candidate(id="3", name="Bob Johnson", party="Independent"),
        ],
        total_votes=0,
    )


def seed_demo_data(state: StoreState) -> None:
    """Replace the store's collections with the demo data set."""
    voter_hash = hash_password(DEMO_VOTER_PASSWORD)
    state.elections[:] = [demo_election()]
    state.admins[:] = [Admin(id="1", username="admin", hashed_password=hash_password(DEMO_ADMIN_PASSWORD))]
    state.voters[:] = [
        Voter(id="1", voter_id="V001", name="Alice Cooper", email="alice@example.com", hashed_password=voter_hash),
        Voter(id="2", voter_id="V002", name="Charlie Brown", email="charlie@example.com", hashed_password=voter_hash),
    ]
    state.vote_records.clear()
    logger.debug("Seeded demo election, admin and voters")
