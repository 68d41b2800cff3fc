from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from datetime import date
from typing import List, Optional

from app.core.database import get_db
from app.models.user import User, UserRole
from app.modules.auth.dependencies import get_current_user, get_current_lead_gen
from app.schemas.progress import ProgressUpdateCreate, ProgressUpdateResponse, ProgressUpdateDetail
from app.services.progress_service import progress_service

router = APIRouter()


@router.get("", response_model=List[ProgressUpdateDetail])
async def list_progress_updates(
    user_id: Optional[int] = Query(None, description="Manager only: filter by user"),
    from_date: Optional[date] = Query(None),
    to_date: Optional[date] = Query(None),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    if current_user.role != UserRole.MANAGER:
        user_id = current_user.id
    return await progress_service.list_progress_updates(
        db, user_id=user_id, from_date=from_date, to_date=to_date
    )


@router.post("", response_model=ProgressUpdateResponse, status_code=status.HTTP_201_CREATED)
async def create_progress_update(
    update_data: ProgressUpdateCreate,
    current_user: User = Depends(get_current_lead_gen),
    db: AsyncSession = Depends(get_db)
):
    """Record today's numbers against the caller's assigned profile"""
    return await progress_service.create_progress_update(db, current_user, update_data)
