"""Session and principal schemas."""

from typing import Literal

from pydantic import BaseModel


class AdminRead(BaseModel):
    """Administrator snapshot without password material."""

    model_config = {"from_attributes": True}

    id: str
    username: str


class SessionRead(BaseModel):
    """Who is currently logged in.

    ``principal_id`` is the internal id of the voter or admin, and
    ``display_name`` the voter's name or the admin's username.
    """

    kind: Literal["anonymous", "voter", "admin"]
    principal_id: str | None = None
    display_name: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.kind != "anonymous"
