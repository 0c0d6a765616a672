"""Dashboard statistics."""

from vote_desk.core.state import StoreState
from vote_desk.schemas.results import DashboardStats


def dashboard_stats(state: StoreState) -> DashboardStats:
    """Count elections, voters and cast votes across the store."""
    return DashboardStats(
        total_elections=len(state.elections),
        active_elections=sum(1 for e in state.elections if e.is_active),
        total_voters=len(state.voters),
        total_votes=len(state.vote_records),
    )
