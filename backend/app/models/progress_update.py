from sqlalchemy import Column, Integer, Date, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime

from app.core.database import Base


class ProgressUpdate(Base):
    """Daily jobs fetched/applied reported by a lead generation user"""
    __tablename__ = "progress_updates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    profile_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    jobs_fetched = Column(Integer, nullable=False)
    jobs_applied = Column(Integer, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User")
    profile = relationship("Profile")
