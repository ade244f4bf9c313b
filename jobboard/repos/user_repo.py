from sqlalchemy.orm import Session

from jobboard.models.user import User


def get_by_id(db: Session, user_id: str) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def upsert(
    db: Session,
    user_id: str,
    *,
    email: str | None = None,
    first_name: str | None = None,
    last_name: str | None = None,
    profile_image_url: str | None = None,
) -> User:
    """
    Create the user on first sight, otherwise refresh profile fields that changed.
    Only writes when something differs, so repeated requests stay read-only.
    """
    profile = {
        "email": email,
        "first_name": first_name,
        "last_name": last_name,
        "profile_image_url": profile_image_url,
    }
    user = get_by_id(db, user_id)
    if not user:
        user = User(id=user_id, **profile)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    changed = False
    for field, value in profile.items():
        if value is not None and getattr(user, field) != value:
            setattr(user, field, value)
            changed = True
    if changed:
        db.commit()
        db.refresh(user)
    return user
