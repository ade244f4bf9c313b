from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from jobboard.schemas.job import JobResponse

ApplicationStatus = Literal["pending", "reviewed", "interview", "rejected", "accepted"]


class ApplicationCreate(BaseModel):
    job_id: int
    cover_letter: str | None = Field(default=None, max_length=20000)
    resume: str | None = Field(default=None, max_length=255)


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus


class ApplicationResponse(BaseModel):
    id: int
    user_id: str
    job_id: int
    status: str
    cover_letter: str | None = None
    resume: str | None = None
    applied_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class ApplicationWithJob(ApplicationResponse):
    job: JobResponse | None = None
