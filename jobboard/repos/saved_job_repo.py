import logging

from sqlalchemy.orm import Session, joinedload

from jobboard.database import upsert_insert
from jobboard.models.company import Company
from jobboard.models.job import Job
from jobboard.models.saved_job import SavedJob

logger = logging.getLogger(__name__)


def save(db: Session, user_id: str, job_id: int) -> SavedJob | None:
    """
    Bookmark a job using ON CONFLICT (user_id, job_id) DO NOTHING.
    Returns None when the job is already saved.
    """
    stmt = (
        upsert_insert(db, SavedJob)
        .values(user_id=user_id, job_id=job_id)
        .on_conflict_do_nothing(index_elements=["user_id", "job_id"])
        .returning(SavedJob.id)
    )
    new_id = db.execute(stmt).scalar_one_or_none()
    db.commit()
    if new_id is None:
        logger.info("Duplicate save ignored: user=%s job=%s", user_id, job_id)
        return None
    return db.get(SavedJob, new_id)


def unsave(db: Session, user_id: str, job_id: int) -> int:
    """Remove a bookmark. Returns number of rows deleted (0 if it was not saved)."""
    count = (
        db.query(SavedJob)
        .filter(SavedJob.user_id == user_id, SavedJob.job_id == job_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return count


def is_saved(db: Session, user_id: str, job_id: int) -> bool:
    return (
        db.query(SavedJob.id)
        .filter(SavedJob.user_id == user_id, SavedJob.job_id == job_id)
        .first()
        is not None
    )


def get_saved_job_ids(db: Session, user_id: str) -> set[int]:
    rows = db.query(SavedJob.job_id).filter(SavedJob.user_id == user_id).all()
    return {r.job_id for r in rows}


def get_user_saved_jobs(db: Session, user_id: str) -> list[Job]:
    """Jobs the user bookmarked, most recently saved first."""
    return (
        db.query(Job)
        .join(SavedJob, SavedJob.job_id == Job.id)
        .options(joinedload(Job.company))
        .filter(SavedJob.user_id == user_id)
        .order_by(SavedJob.saved_at.desc(), SavedJob.id.desc())
        .all()
    )


def get_recent(db: Session, user_id: str, limit: int) -> list:
    """Most recent saves as rows of (id, timestamp, job_title, company_name)."""
    return (
        db.query(
            SavedJob.id,
            SavedJob.saved_at.label("timestamp"),
            Job.title.label("job_title"),
            Company.name.label("company_name"),
        )
        .outerjoin(Job, SavedJob.job_id == Job.id)
        .outerjoin(Company, Job.company_id == Company.id)
        .filter(SavedJob.user_id == user_id)
        .order_by(SavedJob.saved_at.desc(), SavedJob.id.desc())
        .limit(limit)
        .all()
    )
