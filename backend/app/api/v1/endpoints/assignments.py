from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from app.core.database import get_db
from app.core.exceptions import NoProfileAssignedError
from app.models.user import User
from app.modules.auth.dependencies import get_current_manager, get_current_lead_gen, get_current_sales
from app.schemas.assignment import AssignmentCreate, AssignmentResponse, AssignmentDetail, MyProfileResponse
from app.schemas.profile import ProfileResponse
from app.services.assignment_service import assignment_service

router = APIRouter()


# ==================== LEAD GENERATION ====================

@router.get("/lead-gen-assignments", response_model=List[AssignmentDetail])
async def list_lead_gen_assignments(
    current_user: User = Depends(get_current_manager),
    db: AsyncSession = Depends(get_db)
):
    return await assignment_service.list_lead_gen_assignments(db)


@router.post("/lead-gen-assignments", response_model=AssignmentResponse)
async def assign_lead_gen_profile(
    assignment_data: AssignmentCreate,
    current_user: User = Depends(get_current_manager),
    db: AsyncSession = Depends(get_db)
):
    """Assign a profile to a lead generation user, replacing any previous one"""
    return await assignment_service.assign_lead_gen(db, assignment_data.user_id, assignment_data.profile_id)


@router.delete("/lead-gen-assignments/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_lead_gen_assignment(
    user_id: int,
    current_user: User = Depends(get_current_manager),
    db: AsyncSession = Depends(get_db)
):
    await assignment_service.remove_lead_gen_assignment(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ==================== SALES ====================

@router.get("/sales-assignments", response_model=List[AssignmentDetail])
async def list_sales_assignments(
    user_id: Optional[int] = Query(None),
    current_user: User = Depends(get_current_manager),
    db: AsyncSession = Depends(get_db)
):
    return await assignment_service.list_sales_assignments(db, user_id=user_id)


@router.post("/sales-assignments", response_model=AssignmentResponse)
async def assign_sales_profile(
    assignment_data: AssignmentCreate,
    current_user: User = Depends(get_current_manager),
    db: AsyncSession = Depends(get_db)
):
    """Assign a profile to a sales user; repeating an assignment is a no-op"""
    return await assignment_service.assign_sales(db, assignment_data.user_id, assignment_data.profile_id)


@router.delete("/sales-assignments/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_sales_assignment(
    assignment_id: int,
    current_user: User = Depends(get_current_manager),
    db: AsyncSession = Depends(get_db)
):
    await assignment_service.remove_sales_assignment(db, assignment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ==================== CALLER VIEWS ====================

@router.get("/my-profile", response_model=MyProfileResponse)
async def get_my_profile(
    current_user: User = Depends(get_current_lead_gen),
    db: AsyncSession = Depends(get_db)
):
    """Assigned profile and current target of the calling lead generation user"""
    assigned = await assignment_service.get_user_assigned_profile(db, current_user.id)
    if not assigned:
        raise NoProfileAssignedError(current_user.id)

    profile, target = assigned
    return {"profile": profile, "target": target}


@router.get("/my-profiles", response_model=List[ProfileResponse])
async def get_my_profiles(
    current_user: User = Depends(get_current_sales),
    db: AsyncSession = Depends(get_db)
):
    return await assignment_service.get_user_assigned_profiles(db, current_user.id)
