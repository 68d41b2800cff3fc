from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime

from app.core.database import Base


class LeadGenAssignment(Base):
    """One profile per lead generation user"""
    __tablename__ = "lead_gen_assignments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    profile_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User")
    profile = relationship("Profile")


class SalesAssignment(Base):
    """Sales coordinators work many profiles; profiles have many coordinators"""
    __tablename__ = "sales_assignments"
    __table_args__ = (
        UniqueConstraint("user_id", "profile_id", name="uq_sales_assignment_user_profile"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    profile_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User")
    profile = relationship("Profile")
