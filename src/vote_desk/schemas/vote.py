"""Vote log schemas."""

from datetime import datetime

from pydantic import BaseModel


class VoteRecordRead(BaseModel):
    """Snapshot of one vote log entry."""

    model_config = {"from_attributes": True}

    voter_id: str
    candidate_id: str
    election_id: str
    timestamp: datetime
