import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from jobboard.core.security import generate_id
from jobboard.models.resume import Resume

logger = logging.getLogger(__name__)

ENTRY_SECTIONS = ("experience", "education", "projects", "certifications")


def _with_entry_ids(entries: list[dict] | None) -> list[dict]:
    """Give every section entry a stable id; client-supplied ids are kept."""
    out = []
    for entry in entries or []:
        entry = dict(entry)
        if not entry.get("id"):
            entry["id"] = generate_id()
        out.append(entry)
    return out


def _clear_defaults(db: Session, user_id: str, exclude_id: int | None = None) -> None:
    """Unset is_default on the user's resumes. Does not commit."""
    q = db.query(Resume).filter(Resume.user_id == user_id, Resume.is_default == True)
    if exclude_id is not None:
        q = q.filter(Resume.id != exclude_id)
    q.update({Resume.is_default: False}, synchronize_session="fetch")


def create(db: Session, user_id: str, data: dict) -> Resume:
    """
    Create a resume. When it is flagged default, other defaults are cleared
    in the same transaction so the user never ends up with two.
    """
    fields = dict(data)
    for section in ENTRY_SECTIONS:
        fields[section] = _with_entry_ids(fields.get(section))
    fields.setdefault("skills", [])
    try:
        if fields.get("is_default"):
            _clear_defaults(db, user_id)
        resume = Resume(user_id=user_id, **fields)
        db.add(resume)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(resume)
    return resume


def get_user_resumes(db: Session, user_id: str) -> list[Resume]:
    return (
        db.query(Resume)
        .filter(Resume.user_id == user_id)
        .order_by(Resume.updated_at.desc(), Resume.id.desc())
        .all()
    )


def get_by_id(db: Session, resume_id: int, user_id: str) -> Resume | None:
    return (
        db.query(Resume)
        .filter(Resume.id == resume_id, Resume.user_id == user_id)
        .first()
    )


def get_default(db: Session, user_id: str) -> Resume | None:
    return (
        db.query(Resume)
        .filter(Resume.user_id == user_id, Resume.is_default == True)
        .first()
    )


def update(db: Session, resume_id: int, user_id: str, changes: dict) -> Resume | None:
    """Apply a partial update. Only keys present in `changes` are written."""
    resume = get_by_id(db, resume_id, user_id)
    if not resume:
        return None
    try:
        if changes.get("is_default"):
            _clear_defaults(db, user_id, exclude_id=resume.id)
        for field, value in changes.items():
            if field in ENTRY_SECTIONS:
                value = _with_entry_ids(value)
            setattr(resume, field, value)
        resume.updated_at = datetime.now(timezone.utc)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(resume)
    return resume


def set_default(db: Session, resume_id: int, user_id: str) -> Resume | None:
    """Make one resume the user's default: clear the others and flag it, in one transaction."""
    resume = get_by_id(db, resume_id, user_id)
    if not resume:
        return None
    try:
        _clear_defaults(db, user_id, exclude_id=resume.id)
        resume.is_default = True
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(resume)
    logger.info("Default resume for user=%s is now %s", user_id, resume_id)
    return resume


def delete(db: Session, resume_id: int, user_id: str) -> bool:
    resume = get_by_id(db, resume_id, user_id)
    if not resume:
        return False
    db.delete(resume)
    db.commit()
    return True
