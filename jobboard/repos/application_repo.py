import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session, joinedload

from jobboard.database import upsert_insert
from jobboard.models.application import Application
from jobboard.models.company import Company
from jobboard.models.job import Job

logger = logging.getLogger(__name__)


def create(
    db: Session,
    user_id: str,
    job_id: int,
    cover_letter: str | None = None,
    resume: str | None = None,
) -> Application | None:
    """
    Insert an application using ON CONFLICT (user_id, job_id) DO NOTHING.
    Returns None when the user already applied to this job.
    """
    stmt = (
        upsert_insert(db, Application)
        .values(
            user_id=user_id,
            job_id=job_id,
            status="pending",
            cover_letter=cover_letter,
            resume=resume,
        )
        .on_conflict_do_nothing(index_elements=["user_id", "job_id"])
        .returning(Application.id)
    )
    new_id = db.execute(stmt).scalar_one_or_none()
    db.commit()
    if new_id is None:
        logger.info("Duplicate application ignored: user=%s job=%s", user_id, job_id)
        return None
    return db.get(Application, new_id)


def get_by_user_and_job(db: Session, user_id: str, job_id: int) -> Application | None:
    return (
        db.query(Application)
        .filter(Application.user_id == user_id, Application.job_id == job_id)
        .first()
    )


def get_user_applications(db: Session, user_id: str) -> list[Application]:
    return (
        db.query(Application)
        .options(joinedload(Application.job).joinedload(Job.company))
        .filter(Application.user_id == user_id)
        .order_by(Application.applied_at.desc(), Application.id.desc())
        .all()
    )


def get_applied_job_ids(db: Session, user_id: str) -> set[int]:
    rows = db.query(Application.job_id).filter(Application.user_id == user_id).all()
    return {r.job_id for r in rows}


def update_status(
    db: Session,
    application_id: int,
    user_id: str,
    status: str,
) -> Application | None:
    application = (
        db.query(Application)
        .filter(Application.id == application_id, Application.user_id == user_id)
        .first()
    )
    if not application:
        return None
    application.status = status
    application.updated_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(application)
    return application


def get_recent(db: Session, user_id: str, limit: int) -> list:
    """Most recent applications as rows of (id, status, timestamp, job_title, company_name)."""
    return (
        db.query(
            Application.id,
            Application.status,
            Application.applied_at.label("timestamp"),
            Job.title.label("job_title"),
            Company.name.label("company_name"),
        )
        .outerjoin(Job, Application.job_id == Job.id)
        .outerjoin(Company, Job.company_id == Company.id)
        .filter(Application.user_id == user_id)
        .order_by(Application.applied_at.desc(), Application.id.desc())
        .limit(limit)
        .all()
    )
