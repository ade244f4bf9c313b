from sqlalchemy.orm import Session

from jobboard.models.job_alert import JobAlert


def create(db: Session, user_id: str, **criteria) -> JobAlert:
    alert = JobAlert(user_id=user_id, **criteria)
    db.add(alert)
    db.commit()
    db.refresh(alert)
    return alert


def get_user_alerts(db: Session, user_id: str) -> list[JobAlert]:
    return (
        db.query(JobAlert)
        .filter(JobAlert.user_id == user_id)
        .order_by(JobAlert.created_at.desc(), JobAlert.id.desc())
        .all()
    )


def delete(db: Session, alert_id: int, user_id: str) -> bool:
    """Hard-delete one of the user's alerts. Returns True if deleted."""
    alert = (
        db.query(JobAlert)
        .filter(JobAlert.id == alert_id, JobAlert.user_id == user_id)
        .first()
    )
    if not alert:
        return False
    db.delete(alert)
    db.commit()
    return True
