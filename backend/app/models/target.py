from sqlalchemy import Column, Integer, Boolean, Date, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from app.core.database import Base


class Target(Base):
    """Job fetch/apply goal for a user-profile pair over a date range"""
    __tablename__ = "targets"
    __table_args__ = (
        CheckConstraint("jobs_to_fetch >= 0", name="ck_targets_jobs_to_fetch"),
        CheckConstraint("jobs_to_apply >= 0", name="ck_targets_jobs_to_apply"),
        CheckConstraint("end_date >= start_date", name="ck_targets_date_range"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    profile_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    jobs_to_fetch = Column(Integer, nullable=False)
    jobs_to_apply = Column(Integer, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    is_weekly = Column(Boolean, nullable=False, default=False)

    user = relationship("User")
    profile = relationship("Profile")
