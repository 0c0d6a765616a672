"""Authenticated session as a tagged variant.

The variant type itself is the principal tag, so a voter can never be
paired with an admin tag or vice versa.
"""

from dataclasses import dataclass

from vote_desk.models.admin import Admin
from vote_desk.models.voter import Voter


@dataclass(frozen=True)
class Anonymous:
    """No principal is logged in."""


@dataclass(frozen=True)
class VoterSession:
    """A voter is logged in."""

    voter: Voter


@dataclass(frozen=True)
class AdminSession:
    """An administrator is logged in."""

    admin: Admin


Session = Anonymous | VoterSession | AdminSession

ANONYMOUS = Anonymous()
