from fastapi import APIRouter, Depends

from jobboard.dependencies import get_current_user
from jobboard.models.user import User
from jobboard.schemas.auth import UserResponse

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.get("/user", response_model=UserResponse)
def get_me(user: User = Depends(get_current_user)):
    """Return the authenticated user's profile as provisioned from token claims."""
    return user
