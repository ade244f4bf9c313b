from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobboard.database import Base, JSONType


class ExternalJobSource(Base):
    """Provenance of a job ingested from an external feed. Written, never read back."""

    __tablename__ = "external_job_sources"

    id = Column(Integer, primary_key=True, autoincrement=True)
    source = Column(String(50), nullable=False)  # stepstone, indeed, ...
    external_id = Column(String(255), nullable=False)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="SET NULL"))
    last_synced = Column(DateTime(timezone=True), server_default=func.now())
    data = Column(JSONType)

    job = relationship("Job", back_populates="external_sources")
