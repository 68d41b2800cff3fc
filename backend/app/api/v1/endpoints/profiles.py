from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from app.core.config import settings
from app.core.database import get_db
from app.core.exceptions import AuthorizationError, ProfileNotFoundError, ResumeNotFoundError, ValidationError
from app.core.logging_config import logger
from app.models.user import User
from app.modules.auth.dependencies import get_current_user, get_current_manager
from app.schemas.profile import ProfileCreate, ProfileUpdate, ProfileResponse, ResumeUploadResponse
from app.services.assignment_service import assignment_service
from app.services.profile_service import profile_service
from app.services.resume_service import base64_to_bytes, process_resume, validate_resume_upload
from app.utils.date_format import attachment_disposition

router = APIRouter()


@router.get("", response_model=List[ProfileResponse])
async def list_profiles(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    return await profile_service.list_profiles(db)


@router.post("/upload-resume", response_model=ResumeUploadResponse)
async def upload_resume(
    resume_file: Optional[UploadFile] = File(None),
    current_user: User = Depends(get_current_manager)
):
    """
    Parse an uploaded PDF resume.

    Returns the extracted text and the base64 encoded file, ready to be
    sent back with POST /profiles. Nothing is stored here.
    """
    if resume_file is None:
        raise ValidationError("No file uploaded", field="resume_file")

    # declared size first; never buffer more than one byte past the limit
    validate_resume_upload(resume_file.filename, resume_file.size or 0)
    content = await resume_file.read(settings.MAX_RESUME_UPLOAD_SIZE + 1)
    return process_resume(resume_file.filename, content)


@router.get("/{profile_id}", response_model=ProfileResponse)
async def get_profile(
    profile_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    return await profile_service.get_profile(db, profile_id)


@router.post("", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
async def create_profile(
    profile_data: ProfileCreate,
    current_user: User = Depends(get_current_manager),
    db: AsyncSession = Depends(get_db)
):
    return await profile_service.create_profile(db, profile_data, created_by=current_user.id)


@router.patch("/{profile_id}", response_model=ProfileResponse)
async def update_profile(
    profile_id: int,
    profile_data: ProfileUpdate,
    current_user: User = Depends(get_current_manager),
    db: AsyncSession = Depends(get_db)
):
    return await profile_service.update_profile(db, profile_id, profile_data)


@router.delete("/{profile_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_profile(
    profile_id: int,
    current_user: User = Depends(get_current_manager),
    db: AsyncSession = Depends(get_db)
):
    await profile_service.delete_profile(db, profile_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{profile_id}/resume")
async def download_resume(
    profile_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Download the stored PDF of a profile the caller may see"""
    if not await assignment_service.can_access_profile(db, current_user, profile_id):
        raise AuthorizationError("You don't have permission to access this resume")

    try:
        profile = await profile_service.get_profile(db, profile_id)
    except ProfileNotFoundError:
        raise ResumeNotFoundError(profile_id)

    content = base64_to_bytes(profile.resume_buffer) if profile.resume_buffer else b""
    if not content:
        raise ResumeNotFoundError(profile_id)

    file_name = profile.download_file_name
    logger.info(f"User {current_user.id} downloaded resume of profile {profile_id}")

    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": attachment_disposition(file_name)}
    )
