import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.dependencies import get_current_user
from jobboard.models.user import User
from jobboard.repos.job_alert_repo import create as create_alert, delete as delete_alert, get_user_alerts
from jobboard.schemas.job_alert import JobAlertCreate, JobAlertResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/job-alerts", tags=["job-alerts"])


@router.get("", response_model=list[JobAlertResponse])
def list_job_alerts(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return get_user_alerts(db, user.id)


@router.post("", response_model=JobAlertResponse, status_code=status.HTTP_201_CREATED)
def post_job_alert(
    data: JobAlertCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        alert = create_alert(db, user.id, **data.model_dump())
        logger.info("Job alert created: user=%s id=%s", user.id, alert.id)
        return alert
    except Exception as e:
        logger.exception("Create job alert failed for user=%s: %s", user.id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create job alert",
        ) from e


@router.delete("/{alert_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_job_alert(
    alert_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    if not delete_alert(db, alert_id, user.id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job alert not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
