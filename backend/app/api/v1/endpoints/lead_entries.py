from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from datetime import date
from typing import List, Optional

from app.core.database import get_db
from app.models.user import User, UserRole
from app.modules.auth.dependencies import get_current_user, get_current_sales
from app.schemas.lead_entry import LeadEntryCreate, LeadEntryUpdate, LeadEntryResponse, LeadEntryDetail
from app.services.lead_entry_service import lead_entry_service

router = APIRouter()


@router.get("", response_model=List[LeadEntryDetail])
async def list_lead_entries(
    user_id: Optional[int] = Query(None, description="Manager only: filter by user"),
    from_date: Optional[date] = Query(None),
    to_date: Optional[date] = Query(None),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    if current_user.role != UserRole.MANAGER:
        user_id = current_user.id
    return await lead_entry_service.list_lead_entries(
        db, user_id=user_id, from_date=from_date, to_date=to_date
    )


@router.post("", response_model=LeadEntryResponse, status_code=status.HTTP_201_CREATED)
async def create_lead_entry(
    entry_data: LeadEntryCreate,
    current_user: User = Depends(get_current_sales),
    db: AsyncSession = Depends(get_db)
):
    return await lead_entry_service.create_lead_entry(db, current_user, entry_data)


@router.patch("/{entry_id}", response_model=LeadEntryResponse)
async def update_lead_entry(
    entry_id: int,
    entry_data: LeadEntryUpdate,
    current_user: User = Depends(get_current_sales),
    db: AsyncSession = Depends(get_db)
):
    return await lead_entry_service.update_lead_entry(db, current_user, entry_id, entry_data)
