from sqlalchemy.orm import Session

from jobboard.models.company import Company


def create(
    db: Session,
    name: str,
    *,
    description: str | None = None,
    website: str | None = None,
    logo: str | None = None,
    location: str | None = None,
    commit: bool = True,
) -> Company:
    company = Company(
        name=name[:255],
        description=description,
        website=website,
        logo=logo,
        location=location,
    )
    db.add(company)
    if commit:
        db.commit()
        db.refresh(company)
    else:
        db.flush()
    return company


def get_all(db: Session) -> list[Company]:
    return db.query(Company).order_by(Company.name).all()


def get_by_name(db: Session, name: str) -> Company | None:
    return db.query(Company).filter(Company.name == name).first()


def get_or_create_by_name(db: Session, name: str, **fields) -> tuple[Company, bool]:
    """Find a company by exact name or stage a new one. Returns (company, created); caller commits."""
    company = get_by_name(db, name)
    if company:
        return company, False
    return create(db, name, commit=False, **fields), True


def get_by_id(db: Session, company_id: int) -> Company | None:
    return db.query(Company).filter(Company.id == company_id).first()
