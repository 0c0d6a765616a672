"""Results tally: rank candidates and pick a winner.

Pure functions over candidate rows; no store access.
"""

from collections.abc import Sequence

from vote_desk.models.election import Candidate, Election
from vote_desk.schemas.results import ElectionResults, RankedCandidate


def vote_percentage(votes: int, total_votes: int) -> float:
    """Return ``votes`` as a percentage of ``total_votes`` (0.0 when the total is 0)."""
    if total_votes <= 0:
        return 0.0
    return votes / total_votes * 100


def rank_candidates(candidates: Sequence[Candidate], total_votes: int) -> list[RankedCandidate]:
    """Rank candidates by votes descending.

    The sort is stable, so candidates with equal votes keep their ballot order.

    Args:
        candidates: Candidates in ballot order.
        total_votes: Denominator for percentages.

    Returns:
        Ranked candidates, rank 1 first.
    """
    ordered = sorted(candidates, key=lambda c: c.votes, reverse=True)
    return [
        RankedCandidate(
            rank=position,
            id=candidate.id,
            name=candidate.name,
            party=candidate.party,
            image=candidate.image,
            votes=candidate.votes,
            percentage=vote_percentage(candidate.votes, total_votes),
        )
        for position, candidate in enumerate(ordered, start=1)
    ]


def tally_election(election: Election) -> ElectionResults:
    """Build the ranked results for an election.

    The winner is the top-ranked candidate, or None while no votes have been cast.
    """
    ranked = rank_candidates(election.candidates, election.total_votes)
    winner = ranked[0] if ranked and election.total_votes > 0 else None
    return ElectionResults(
        election_id=election.id,
        title=election.title,
        is_active=election.is_active,
        start_date=election.start_date,
        end_date=election.end_date,
        total_votes=election.total_votes,
        candidates=ranked,
        winner=winner,
    )
