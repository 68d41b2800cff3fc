from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from app.core.database import get_db
from app.models.user import User, UserRole
from app.modules.auth.dependencies import get_current_user, get_current_manager
from app.schemas.target import TargetCreate, TargetUpdate, TargetResponse, TargetDetail
from app.services.target_service import target_service

router = APIRouter()


@router.get("", response_model=List[TargetDetail])
async def list_targets(
    user_id: Optional[int] = Query(None, description="Manager only: filter by user"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Managers see every target; other roles see their own"""
    if current_user.role != UserRole.MANAGER:
        user_id = current_user.id
    return await target_service.list_targets(db, user_id=user_id)


@router.post("", response_model=TargetResponse, status_code=status.HTTP_201_CREATED)
async def create_target(
    target_data: TargetCreate,
    current_user: User = Depends(get_current_manager),
    db: AsyncSession = Depends(get_db)
):
    return await target_service.create_target(db, target_data)


@router.patch("/{target_id}", response_model=TargetResponse)
async def update_target(
    target_id: int,
    target_data: TargetUpdate,
    current_user: User = Depends(get_current_manager),
    db: AsyncSession = Depends(get_db)
):
    return await target_service.update_target(db, target_id, target_data)


@router.delete("/{target_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_target(
    target_id: int,
    current_user: User = Depends(get_current_manager),
    db: AsyncSession = Depends(get_db)
):
    await target_service.delete_target(db, target_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
