from sqlalchemy import Column, Integer, String, Boolean, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobboard.database import Base


class JobAlert(Base):
    """Stored search criteria. Delivery of alerts is not implemented."""

    __tablename__ = "job_alerts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    keywords = Column(String(255))
    location = Column(String(255))
    type = Column(String(50))
    salary_min = Column(Numeric(12, 2))
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="job_alerts")
