from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from jobboard.schemas.job import JobType


class JobAlertCreate(BaseModel):
    keywords: str | None = Field(default=None, max_length=255)
    location: str | None = Field(default=None, max_length=255)
    type: JobType | None = None
    salary_min: Decimal | None = Field(default=None, ge=0)
    is_active: bool = True

    @model_validator(mode="after")
    def has_some_criteria(self):
        if not any([self.keywords, self.location, self.type, self.salary_min]):
            raise ValueError("At least one of keywords, location, type or salary_min is required")
        return self


class JobAlertResponse(BaseModel):
    id: int
    user_id: str
    keywords: str | None = None
    location: str | None = None
    type: str | None = None
    salary_min: Decimal | None = None
    is_active: bool = True
    created_at: datetime | None = None

    class Config:
        from_attributes = True
