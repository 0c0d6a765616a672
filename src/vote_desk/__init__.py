"""vote-desk: in-memory election store with voter and admin workflows."""

__version__ = "0.1.0"
