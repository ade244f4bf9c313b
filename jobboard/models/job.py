from sqlalchemy import Column, Integer, String, Text, Boolean, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobboard.database import Base, JSONType

JOB_TYPES = ("full-time", "part-time", "contract", "internship")


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="SET NULL"), nullable=True, index=True)
    location = Column(String(255))
    type = Column(String(50), nullable=False)  # full-time | part-time | contract | internship
    salary_min = Column(Numeric(12, 2))
    salary_max = Column(Numeric(12, 2))
    skills = Column(JSONType, default=list)
    requirements = Column(Text)
    is_active = Column(Boolean, default=True, nullable=False)
    posted_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    company = relationship("Company", back_populates="jobs")
    applications = relationship("Application", back_populates="job", passive_deletes=True)
    saved_by = relationship("SavedJob", back_populates="job", passive_deletes=True)
    external_sources = relationship("ExternalJobSource", back_populates="job")
