from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobboard.database import Base


class User(Base):
    """Identity mirrored from the auth provider; id is the token subject."""

    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=True)
    first_name = Column(String)
    last_name = Column(String)
    profile_image_url = Column(String)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    applications = relationship("Application", back_populates="user", passive_deletes=True)
    saved_jobs = relationship("SavedJob", back_populates="user", passive_deletes=True)
    job_alerts = relationship("JobAlert", back_populates="user", passive_deletes=True)
    resumes = relationship("Resume", back_populates="user", passive_deletes=True)
