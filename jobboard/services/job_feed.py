import logging

from sqlalchemy.orm import Session

from jobboard.config import settings
from jobboard.models.job import Job
from jobboard.repos.application_repo import get_applied_job_ids
from jobboard.repos.job_repo import get_jobs
from jobboard.repos.saved_job_repo import get_saved_job_ids
from jobboard.schemas.job import JobForUser

logger = logging.getLogger(__name__)


def decorate_jobs_for_user(db: Session, jobs: list[Job], user_id: str) -> list[JobForUser]:
    """
    Flag each job with is_saved / has_applied for one user.
    Two lookups for the user's saved and applied job ids, then an in-memory join.
    """
    if not jobs:
        return []
    saved_ids = get_saved_job_ids(db, user_id)
    applied_ids = get_applied_job_ids(db, user_id)
    return [
        JobForUser.model_validate(job).model_copy(
            update={
                "is_saved": job.id in saved_ids,
                "has_applied": job.id in applied_ids,
            }
        )
        for job in jobs
    ]


def get_jobs_for_user(
    db: Session,
    user_id: str,
    *,
    location: str | None = None,
    job_type: str | None = None,
    salary_min=None,
    keywords: str | None = None,
    limit: int | None = None,
    offset: int = 0,
) -> list[JobForUser]:
    if limit is None:
        limit = settings.user_jobs_default_limit
    jobs = get_jobs(
        db,
        location=location,
        job_type=job_type,
        salary_min=salary_min,
        keywords=keywords,
        limit=limit,
        offset=offset,
    )
    logger.debug("Job search user=%s returned %d jobs", user_id, len(jobs))
    return decorate_jobs_for_user(db, jobs, user_id)
