from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from jobboard.schemas.company import CompanyResponse

JobType = Literal["full-time", "part-time", "contract", "internship"]


class JobCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    company_id: int | None = None
    location: str | None = Field(default=None, max_length=255)
    type: JobType
    salary_min: Decimal | None = Field(default=None, ge=0)
    salary_max: Decimal | None = Field(default=None, ge=0)
    skills: list[str] = Field(default_factory=list)
    requirements: str | None = None
    is_active: bool = True

    @field_validator("skills")
    @classmethod
    def strip_blank_skills(cls, v: list[str]) -> list[str]:
        return [s.strip() for s in v if s and s.strip()]

    @model_validator(mode="after")
    def salary_range_ordered(self):
        if self.salary_min is not None and self.salary_max is not None and self.salary_max < self.salary_min:
            raise ValueError("salary_max must be greater than or equal to salary_min")
        return self


class JobResponse(BaseModel):
    id: int
    title: str
    description: str
    company_id: int | None = None
    location: str | None = None
    type: str
    salary_min: Decimal | None = None
    salary_max: Decimal | None = None
    skills: list[str] = Field(default_factory=list)
    requirements: str | None = None
    is_active: bool = True
    posted_at: datetime | None = None
    created_at: datetime | None = None
    company: CompanyResponse | None = None

    class Config:
        from_attributes = True

    @field_validator("skills", mode="before")
    @classmethod
    def skills_default(cls, v):
        return v or []


class JobForUser(JobResponse):
    """Job as seen by one user: carries saved/applied flags."""

    is_saved: bool = False
    has_applied: bool = False
