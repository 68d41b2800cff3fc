from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import date as date_type, datetime

from app.schemas.auth import UserResponse
from app.schemas.profile import ProfileResponse


class ProgressUpdateCreate(BaseModel):
    date: date_type
    jobs_fetched: int = Field(..., ge=0)
    jobs_applied: int = Field(..., ge=0)
    notes: Optional[str] = None


class ProgressUpdateResponse(BaseModel):
    id: int
    user_id: int
    profile_id: int
    date: date_type
    jobs_fetched: int
    jobs_applied: int
    notes: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProgressUpdateDetail(ProgressUpdateResponse):
    user: Optional[UserResponse] = None
    profile: Optional[ProfileResponse] = None
