import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.dependencies import get_current_user
from jobboard.models.user import User
from jobboard.repos.dashboard_repo import get_user_stats
from jobboard.schemas.dashboard import ActivityItem, DashboardStats
from jobboard.services.activity_feed import get_recent_activity

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
def dashboard_stats(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        return get_user_stats(db, user.id)
    except Exception as e:
        logger.exception("Dashboard stats failed for user=%s: %s", user.id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch dashboard stats",
        ) from e


@router.get("/activity", response_model=list[ActivityItem])
def dashboard_activity(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Applications and saves merged newest first."""
    try:
        return get_recent_activity(db, user.id)
    except Exception as e:
        logger.exception("Recent activity failed for user=%s: %s", user.id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch recent activity",
        ) from e
