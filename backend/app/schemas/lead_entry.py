from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import date as date_type, datetime

from app.schemas.auth import UserResponse
from app.schemas.profile import ProfileResponse


class LeadEntryCreate(BaseModel):
    profile_id: int
    date: date_type
    new_leads: int = Field(..., ge=0)
    client_rejections: int = Field(..., ge=0)
    team_rejections: int = Field(..., ge=0)
    notes: Optional[str] = None


class LeadEntryUpdate(BaseModel):
    profile_id: Optional[int] = None
    date: Optional[date_type] = None
    new_leads: Optional[int] = Field(None, ge=0)
    client_rejections: Optional[int] = Field(None, ge=0)
    team_rejections: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None


class LeadEntryResponse(BaseModel):
    id: int
    user_id: int
    profile_id: int
    date: date_type
    new_leads: int
    client_rejections: int
    team_rejections: int
    notes: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LeadEntryDetail(LeadEntryResponse):
    user: Optional[UserResponse] = None
    profile: Optional[ProfileResponse] = None
