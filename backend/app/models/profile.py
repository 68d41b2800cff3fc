from sqlalchemy import Column, String, DateTime, Integer, Text, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime

from app.core.database import Base


class Profile(Base):
    """Candidate resume record assignable to team members"""
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)

    # Resume
    resume_content = Column(Text, nullable=True)  # extracted PDF text
    resume_file_name = Column(String(255), nullable=True)
    resume_buffer = Column(Text, nullable=True)  # base64 encoded PDF

    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    creator = relationship("User", foreign_keys=[created_by])

    @property
    def has_resume(self) -> bool:
        return bool(self.resume_buffer)

    @property
    def download_file_name(self) -> str:
        if self.resume_file_name:
            return self.resume_file_name
        return f"{'_'.join(self.name.split())}_Resume.pdf"

    def __repr__(self):
        return f"<Profile {self.id} {self.name}>"
