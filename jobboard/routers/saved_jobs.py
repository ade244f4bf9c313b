import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.dependencies import get_current_user
from jobboard.models.user import User
from jobboard.repos.job_repo import exists as job_exists
from jobboard.repos.saved_job_repo import get_user_saved_jobs, save, unsave
from jobboard.schemas.job import JobForUser
from jobboard.schemas.saved_job import SavedJobCreate, SavedJobResponse
from jobboard.services.job_feed import decorate_jobs_for_user

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/saved-jobs", tags=["saved-jobs"])


@router.get("", response_model=list[JobForUser])
def list_saved_jobs(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        jobs = get_user_saved_jobs(db, user.id)
        return decorate_jobs_for_user(db, jobs, user.id)
    except Exception as e:
        logger.exception("List saved jobs failed for user=%s: %s", user.id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch saved jobs",
        ) from e


@router.post("", response_model=SavedJobResponse, status_code=status.HTTP_201_CREATED)
def save_job(
    data: SavedJobCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        if not job_exists(db, data.job_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
        saved = save(db, user.id, data.job_id)
        if saved is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Job is already saved")
        logger.info("Job saved: user=%s job=%s", user.id, data.job_id)
        return saved
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Save job failed for user=%s job=%s: %s", user.id, data.job_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to save job") from e


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def unsave_job(
    job_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Remove a bookmark. Succeeds even if the job was not saved."""
    try:
        removed = unsave(db, user.id, job_id)
        logger.info("Job unsaved: user=%s job=%s removed=%d", user.id, job_id, removed)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except Exception as e:
        logger.exception("Unsave job failed for user=%s job=%s: %s", user.id, job_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to unsave job") from e
