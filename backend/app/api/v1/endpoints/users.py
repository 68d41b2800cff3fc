from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from app.core.database import get_db
from app.models.user import User, UserRole
from app.modules.auth.dependencies import get_current_manager
from app.schemas.auth import UserResponse
from app.services.user_service import user_service

router = APIRouter()


@router.get("", response_model=List[UserResponse])
async def list_users(
    role: Optional[UserRole] = Query(None, description="Filter by role"),
    current_user: User = Depends(get_current_manager),
    db: AsyncSession = Depends(get_db)
):
    """List team members (manager only)"""
    return await user_service.list_users(db, role=role)
