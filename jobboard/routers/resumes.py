import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.dependencies import get_current_user
from jobboard.models.user import User
from jobboard.repos.resume_repo import (
    create as create_resume,
    delete as delete_resume,
    get_by_id as get_resume_by_id,
    get_default,
    get_user_resumes,
    set_default,
    update as update_resume,
)
from jobboard.schemas.resume import ResumeCreate, ResumeResponse, ResumeUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/resumes", tags=["resumes"])


@router.get("", response_model=list[ResumeResponse])
def list_resumes(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return get_user_resumes(db, user.id)


@router.post("", response_model=ResumeResponse, status_code=status.HTTP_201_CREATED)
def save_resume(
    data: ResumeCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        resume = create_resume(db, user.id, data.model_dump())
        logger.info("Resume created for user %s: id=%s default=%s", user.id, resume.id, resume.is_default)
        return resume
    except Exception as e:
        logger.exception("Failed saving resume for user=%s: %s", user.id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create resume") from e


@router.get("/default", response_model=ResumeResponse)
def get_default_resume(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    resume = get_default(db, user.id)
    if not resume:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No default resume")
    return resume


@router.get("/{resume_id}", response_model=ResumeResponse)
def get_resume(
    resume_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    resume = get_resume_by_id(db, resume_id, user.id)
    if not resume:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resume not found")
    return resume


@router.put("/{resume_id}", response_model=ResumeResponse)
def put_resume(
    resume_id: int,
    data: ResumeUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        resume = update_resume(db, resume_id, user.id, data.model_dump(exclude_unset=True))
    except Exception as e:
        logger.exception("Failed updating resume=%s for user=%s: %s", resume_id, user.id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update resume") from e
    if not resume:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resume not found")
    logger.info("Resume updated for user %s: id=%s", user.id, resume_id)
    return resume


@router.delete("/{resume_id}")
def remove_resume(
    resume_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        deleted = delete_resume(db, resume_id, user.id)
    except Exception as e:
        logger.exception("Failed deleting resume=%s for user=%s: %s", resume_id, user.id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete resume") from e
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resume not found")
    return {"message": "Resume deleted successfully"}


@router.put("/{resume_id}/default")
def make_default_resume(
    resume_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        resume = set_default(db, resume_id, user.id)
    except Exception as e:
        logger.exception("Failed setting default resume=%s for user=%s: %s", resume_id, user.id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to set default resume",
        ) from e
    if not resume:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resume not found")
    return {"message": "Default resume updated successfully"}
