from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime


class ProfileCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    resume_content: str = Field(..., min_length=1)
    resume_file_name: Optional[str] = None
    resume_buffer: Optional[str] = None


class ProfileUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    resume_content: Optional[str] = Field(None, min_length=1)
    resume_file_name: Optional[str] = None
    resume_buffer: Optional[str] = None

    @field_validator('name', 'description', 'resume_content')
    @classmethod
    def reject_null(cls, v):
        # may be omitted, but not cleared
        if v is None:
            raise ValueError("cannot be null")
        return v


class ProfileResponse(BaseModel):
    """Profile without the stored PDF; fetch it from /profiles/{id}/resume"""
    id: int
    name: str
    description: str
    resume_content: Optional[str] = None
    resume_file_name: Optional[str] = None
    has_resume: bool = False
    created_by: Optional[int] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ResumeUploadResponse(BaseModel):
    resume_content: str
    resume_file_name: str
    resume_buffer: str
