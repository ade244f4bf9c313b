"""Per-user dashboard counters."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from jobboard.models.application import Application
from jobboard.models.saved_job import SavedJob

PENDING_STATUSES = ("pending", "reviewed")
INTERVIEW_STATUS = "interview"


def get_user_stats(db: Session, user_id: str) -> dict:
    """Return dashboard counts; each is its own query and reflects current state."""
    application_count = (
        db.query(func.count(Application.id)).filter(Application.user_id == user_id).scalar() or 0
    )
    saved_count = db.query(func.count(SavedJob.id)).filter(SavedJob.user_id == user_id).scalar() or 0
    pending_count = (
        db.query(func.count(Application.id))
        .filter(Application.user_id == user_id, Application.status.in_(PENDING_STATUSES))
        .scalar()
        or 0
    )
    interview_count = (
        db.query(func.count(Application.id))
        .filter(Application.user_id == user_id, Application.status == INTERVIEW_STATUS)
        .scalar()
        or 0
    )
    return {
        "applications": application_count,
        "saved_jobs": saved_count,
        "pending": pending_count,
        "interviews": interview_count,
    }
