import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.dependencies import get_current_user
from jobboard.models.user import User
from jobboard.repos.company_repo import create as create_company, get_all
from jobboard.schemas.company import CompanyCreate, CompanyResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/companies", tags=["companies"])


@router.get("", response_model=list[CompanyResponse])
def list_companies(db: Session = Depends(get_db)):
    """Public list of companies."""
    return get_all(db)


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def post_company(
    data: CompanyCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        company = create_company(db, **data.model_dump())
        logger.info("Company created: id=%s name=%r by user=%s", company.id, company.name, user.id)
        return company
    except Exception as e:
        logger.exception("Create company failed for user=%s: %s", user.id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create company",
        ) from e
