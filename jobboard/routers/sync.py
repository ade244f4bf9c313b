import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.dependencies import get_current_user
from jobboard.models.user import User
from jobboard.schemas.job import JobResponse
from jobboard.schemas.sync import SyncRequest, SyncResponse
from jobboard.services.job_sources import get_provider
from jobboard.services.job_sync import sync_external_jobs

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/stepstone", tags=["sync"])


@router.post("/sync", response_model=SyncResponse)
def sync_stepstone(
    body: SyncRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Import Stepstone postings matching the keywords as jobs."""
    provider = get_provider("stepstone")
    logger.info("Stepstone sync requested by user=%s location=%r keywords=%r", user.id, body.location, body.keywords)
    try:
        jobs = sync_external_jobs(db, provider, location=body.location, keywords=body.keywords)
    except Exception as e:
        logger.exception("Stepstone sync failed for user=%s: %s", user.id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to sync Stepstone jobs",
        ) from e
    return SyncResponse(
        message=f"Successfully synced {len(jobs)} jobs from {provider.display_name}",
        jobs=[JobResponse.model_validate(job) for job in jobs],
    )
