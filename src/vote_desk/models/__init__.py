"""Entity registry for the in-memory store."""

from vote_desk.models.admin import Admin
from vote_desk.models.election import DEFAULT_CANDIDATE_IMAGE, Candidate, Election
from vote_desk.models.session import ANONYMOUS, AdminSession, Anonymous, Session, VoterSession
from vote_desk.models.vote_record import VoteRecord
from vote_desk.models.voter import Voter

__all__ = [
    "ANONYMOUS",
    "DEFAULT_CANDIDATE_IMAGE",
    "Admin",
    "AdminSession",
    "Anonymous",
    "Candidate",
    "Election",
    "Session",
    "VoteRecord",
    "Voter",
    "VoterSession",
]
