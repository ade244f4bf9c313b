import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.dependencies import get_current_user
from jobboard.models.user import User
from jobboard.repos.application_repo import get_by_user_and_job
from jobboard.repos.company_repo import get_by_id as get_company_by_id
from jobboard.repos.job_repo import JobQueryError, create as create_job, get_by_id as get_job_by_id
from jobboard.repos.saved_job_repo import is_saved
from jobboard.schemas.job import JobCreate, JobForUser, JobResponse
from jobboard.services.job_feed import get_jobs_for_user

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/jobs", tags=["jobs"])


@router.get("", response_model=list[JobForUser])
def list_jobs(
    location: str | None = None,
    job_type: str | None = Query(default=None, alias="type"),
    salary_min: int | None = Query(default=None, alias="salaryMin", ge=0),
    keywords: str | None = None,
    limit: int | None = Query(default=None, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """
    Search active jobs. location is a case-insensitive substring ("All Locations" = any),
    type is exact ("all" = any), salaryMin is a floor on the posted minimum salary and
    keywords match title or description. Each job carries is_saved / has_applied flags.
    """
    try:
        return get_jobs_for_user(
            db,
            user.id,
            location=location,
            job_type=job_type,
            salary_min=salary_min,
            keywords=keywords,
            limit=limit,
            offset=offset,
        )
    except JobQueryError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e)) from e


@router.get("/{job_id}", response_model=JobForUser)
def get_job(
    job_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """One job with its company and the caller's saved/applied flags."""
    job = get_job_by_id(db, job_id)
    if not job:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    return JobForUser.model_validate(job).model_copy(
        update={
            "is_saved": is_saved(db, user.id, job.id),
            "has_applied": get_by_user_and_job(db, user.id, job.id) is not None,
        }
    )


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
def post_job(
    data: JobCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        if data.company_id is not None and not get_company_by_id(db, data.company_id):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Company not found")
        job = create_job(db, **data.model_dump())
        logger.info("Job created: id=%s title=%r by user=%s", job.id, job.title, user.id)
        return job
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Create job failed for user=%s: %s", user.id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create job") from e
