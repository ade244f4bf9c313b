from datetime import datetime

from pydantic import BaseModel, Field


class CompanyCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    website: str | None = Field(default=None, max_length=255)
    logo: str | None = Field(default=None, max_length=255)
    location: str | None = Field(default=None, max_length=255)


class CompanyResponse(BaseModel):
    id: int
    name: str
    description: str | None = None
    website: str | None = None
    logo: str | None = None
    location: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
