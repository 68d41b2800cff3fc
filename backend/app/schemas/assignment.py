from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime

from app.schemas.auth import UserResponse
from app.schemas.profile import ProfileResponse
from app.schemas.target import TargetResponse


class AssignmentCreate(BaseModel):
    user_id: int
    profile_id: int


class AssignmentResponse(BaseModel):
    id: int
    user_id: int
    profile_id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AssignmentDetail(AssignmentResponse):
    user: Optional[UserResponse] = None
    profile: Optional[ProfileResponse] = None


class MyProfileResponse(BaseModel):
    profile: ProfileResponse
    target: Optional[TargetResponse] = None
