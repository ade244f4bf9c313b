from pydantic import BaseModel, Field

from jobboard.schemas.job import JobResponse


class SyncRequest(BaseModel):
    location: str | None = Field(default=None, max_length=255)
    keywords: str | None = Field(default=None, max_length=255)


class SyncResponse(BaseModel):
    message: str
    jobs: list[JobResponse]
