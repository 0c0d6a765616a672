"""Administrator row."""

from dataclasses import dataclass


@dataclass
class Admin:
    """An administrator account. Admins are seeded and never edited at runtime."""

    id: str
    username: str
    hashed_password: str
