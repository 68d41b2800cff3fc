from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from datetime import date
from typing import List, Optional

from app.core.database import get_db
from app.models.user import User
from app.modules.auth.dependencies import get_current_manager
from app.schemas.performance import TeamPerformanceRow
from app.services.performance_service import performance_service

router = APIRouter()


@router.get("/team-performance", response_model=List[TeamPerformanceRow])
async def get_team_performance(
    from_date: Optional[date] = Query(None),
    to_date: Optional[date] = Query(None),
    current_user: User = Depends(get_current_manager),
    db: AsyncSession = Depends(get_db)
):
    return await performance_service.get_team_performance(db, from_date, to_date)
