import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.core.security import IDENTITY_CLAIMS, decode_access_token
from jobboard.models.user import User
from jobboard.repos.user_repo import upsert

logger = logging.getLogger(__name__)
security = HTTPBearer(auto_error=False)


def get_current_user(
    db: Session = Depends(get_db),
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> User:
    """Resolve the caller from the bearer token, provisioning the user row on first sight."""
    if not credentials:
        logger.info("Auth failed: missing bearer credentials")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    claims = decode_access_token(credentials.credentials)
    if not claims:
        logger.info("Auth failed: invalid or expired token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
    profile = {k: claims.get(k) for k in IDENTITY_CLAIMS}
    return upsert(db, claims["sub"], **profile)
