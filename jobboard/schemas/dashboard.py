from datetime import datetime
from typing import Literal

from pydantic import BaseModel


class DashboardStats(BaseModel):
    applications: int
    saved_jobs: int
    pending: int
    interviews: int


class ActivityItem(BaseModel):
    type: Literal["application", "save"]
    id: int
    job_title: str | None = None
    company_name: str | None = None
    status: str | None = None
    timestamp: datetime | None = None
