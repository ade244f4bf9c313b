"""Recent-activity feed: applications and saves merged into one timeline."""

from datetime import datetime

from sqlalchemy.orm import Session

from jobboard.config import settings
from jobboard.repos import application_repo, saved_job_repo


def _sort_key(item: dict) -> float:
    ts: datetime | None = item.get("timestamp")
    # Missing timestamps sort as the epoch, i.e. oldest.
    return ts.timestamp() if ts else 0.0


def merge_activity(applications: list, saves: list, limit: int) -> list[dict]:
    """Tag both streams, order newest first and keep the top `limit` entries."""
    items = [
        {
            "type": "application",
            "id": row.id,
            "job_title": row.job_title,
            "company_name": row.company_name,
            "status": row.status,
            "timestamp": row.timestamp,
        }
        for row in applications
    ]
    items.extend(
        {
            "type": "save",
            "id": row.id,
            "job_title": row.job_title,
            "company_name": row.company_name,
            "status": None,
            "timestamp": row.timestamp,
        }
        for row in saves
    )
    items.sort(key=_sort_key, reverse=True)
    return items[:limit]


def get_recent_activity(db: Session, user_id: str, limit: int | None = None) -> list[dict]:
    """
    Return the user's `limit` most recent activities across both streams.
    Each stream is fetched with the full limit, so an entry that belongs in the
    global top `limit` is never cut off by a per-stream cap.
    """
    if limit is None:
        limit = settings.recent_activity_limit
    applications = application_repo.get_recent(db, user_id, limit)
    saves = saved_job_repo.get_recent(db, user_id, limit)
    return merge_activity(applications, saves, limit)
