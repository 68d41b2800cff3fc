from pydantic import BaseModel, Field, ConfigDict, model_validator
from typing import Optional
from datetime import date

from app.schemas.auth import UserResponse
from app.schemas.profile import ProfileResponse


class TargetCreate(BaseModel):
    user_id: int
    profile_id: int
    jobs_to_fetch: int = Field(..., ge=0)
    jobs_to_apply: int = Field(..., ge=0)
    start_date: date
    end_date: date
    is_weekly: bool = False

    @model_validator(mode='after')
    def validate_date_range(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        return self


class TargetUpdate(BaseModel):
    jobs_to_fetch: int = Field(..., ge=0, strict=True)
    jobs_to_apply: int = Field(..., ge=0, strict=True)


class TargetResponse(BaseModel):
    id: int
    user_id: int
    profile_id: int
    jobs_to_fetch: int
    jobs_to_apply: int
    start_date: date
    end_date: date
    is_weekly: bool

    model_config = ConfigDict(from_attributes=True)


class TargetDetail(TargetResponse):
    user: Optional[UserResponse] = None
    profile: Optional[ProfileResponse] = None
