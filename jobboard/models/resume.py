from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobboard.database import Base, JSONType


class Resume(Base):
    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    personal_info = Column(JSONType)
    experience = Column(JSONType, default=list)
    education = Column(JSONType, default=list)
    skills = Column(JSONType, default=list)
    projects = Column(JSONType, default=list)
    certifications = Column(JSONType, default=list)
    template = Column(String(50), default="modern")
    is_default = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="resumes")
