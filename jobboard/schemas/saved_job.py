from datetime import datetime

from pydantic import BaseModel


class SavedJobCreate(BaseModel):
    job_id: int


class SavedJobResponse(BaseModel):
    id: int
    user_id: str
    job_id: int
    saved_at: datetime | None = None

    class Config:
        from_attributes = True
