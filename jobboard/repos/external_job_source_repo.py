from sqlalchemy.orm import Session

from jobboard.models.external_job_source import ExternalJobSource


def create(
    db: Session,
    source: str,
    external_id: str,
    job_id: int | None,
    data: dict | None = None,
    *,
    commit: bool = True,
) -> ExternalJobSource:
    record = ExternalJobSource(
        source=source,
        external_id=external_id[:255],
        job_id=job_id,
        data=data,
    )
    db.add(record)
    if commit:
        db.commit()
        db.refresh(record)
    else:
        db.flush()
    return record
