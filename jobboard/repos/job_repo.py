import logging
from decimal import Decimal

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from jobboard.config import settings
from jobboard.models.job import Job

logger = logging.getLogger(__name__)

# Sentinels the job filter UI sends for "no filter".
ALL_LOCATIONS = "All Locations"
ALL_TYPES = "all"


class JobQueryError(Exception):
    """The job store could not be queried. Distinct from a query with no matches."""


def build_job_filters(
    location: str | None = None,
    job_type: str | None = None,
    salary_min: Decimal | int | None = None,
    keywords: str | None = None,
) -> list:
    """Return the WHERE conditions for a job search; every condition is ANDed."""
    conditions = [Job.is_active == True]
    if location and location != ALL_LOCATIONS:
        conditions.append(Job.location.ilike(f"%{location}%"))
    if job_type and job_type != ALL_TYPES:
        conditions.append(Job.type == job_type)
    if salary_min:
        conditions.append(Job.salary_min >= salary_min)
    if keywords:
        term = f"%{keywords}%"
        conditions.append(
            or_(
                Job.title.ilike(term),
                Job.description.ilike(term),
            )
        )
    return conditions


def get_jobs(
    db: Session,
    *,
    location: str | None = None,
    job_type: str | None = None,
    salary_min: Decimal | int | None = None,
    keywords: str | None = None,
    limit: int | None = None,
    offset: int = 0,
) -> list[Job]:
    """
    Active jobs with their company, newest posting first.
    Raises JobQueryError when the store fails instead of masking it as "no results".
    """
    if limit is None:
        limit = settings.jobs_default_limit
    conditions = build_job_filters(location, job_type, salary_min, keywords)
    try:
        return (
            db.query(Job)
            .options(joinedload(Job.company))
            .filter(*conditions)
            .order_by(Job.posted_at.desc(), Job.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Job query failed: %s", e)
        raise JobQueryError("Job search is temporarily unavailable") from e


def get_by_id(db: Session, job_id: int) -> Job | None:
    return (
        db.query(Job)
        .options(joinedload(Job.company))
        .filter(Job.id == job_id)
        .first()
    )


def exists(db: Session, job_id: int) -> bool:
    return db.query(Job.id).filter(Job.id == job_id).first() is not None


def create(db: Session, *, commit: bool = True, **fields) -> Job:
    job = Job(**fields)
    if job.skills is None:
        job.skills = []
    db.add(job)
    if commit:
        db.commit()
        db.refresh(job)
    else:
        db.flush()
    return job
