import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.dependencies import get_current_user
from jobboard.models.user import User
from jobboard.repos.application_repo import (
    create as create_application,
    get_user_applications,
    update_status,
)
from jobboard.repos.job_repo import exists as job_exists
from jobboard.schemas.application import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationStatusUpdate,
    ApplicationWithJob,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/applications", tags=["applications"])


@router.get("", response_model=list[ApplicationWithJob])
def list_applications(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """The user's applications with job and company, newest first."""
    try:
        return get_user_applications(db, user.id)
    except Exception as e:
        logger.exception("List applications failed for user=%s: %s", user.id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch applications",
        ) from e


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
def apply_to_job(
    data: ApplicationCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        if not job_exists(db, data.job_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
        application = create_application(
            db,
            user.id,
            data.job_id,
            cover_letter=data.cover_letter,
            resume=data.resume,
        )
        if application is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="You have already applied to this job",
            )
        logger.info("Application created: user=%s job=%s id=%s", user.id, data.job_id, application.id)
        return application
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Create application failed for user=%s job=%s: %s", user.id, data.job_id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create application",
        ) from e


@router.patch("/{application_id}", response_model=ApplicationResponse)
def update_application_status(
    application_id: int,
    body: ApplicationStatusUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Change only the status of one of the user's applications."""
    application = update_status(db, application_id, user.id, body.status)
    if not application:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found")
    logger.info("Application status updated: user=%s application=%s status=%s", user.id, application_id, body.status)
    return application
