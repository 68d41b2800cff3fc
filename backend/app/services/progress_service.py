"""
Progress Service - daily jobs fetched/applied by lead generation users
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from datetime import date
from typing import Optional, List

from app.core.exceptions import ValidationError
from app.core.logging_config import logger
from app.models.progress_update import ProgressUpdate
from app.models.user import User
from app.schemas.progress import ProgressUpdateCreate
from app.services.assignment_service import assignment_service


class ProgressService:
    """Service for progress updates"""

    async def list_progress_updates(
        self,
        db: AsyncSession,
        user_id: Optional[int] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        expand: bool = True
    ) -> List[ProgressUpdate]:
        """Updates in an inclusive date window, oldest first"""
        query = select(ProgressUpdate).order_by(ProgressUpdate.date, ProgressUpdate.id)
        if expand:
            query = query.options(selectinload(ProgressUpdate.user), selectinload(ProgressUpdate.profile))
        if user_id is not None:
            query = query.where(ProgressUpdate.user_id == user_id)
        if from_date is not None:
            query = query.where(ProgressUpdate.date >= from_date)
        if to_date is not None:
            query = query.where(ProgressUpdate.date <= to_date)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def create_progress_update(
        self,
        db: AsyncSession,
        user: User,
        update_data: ProgressUpdateCreate
    ) -> ProgressUpdate:
        """Record progress against the caller's assigned profile"""
        assigned = await assignment_service.get_user_assigned_profile(db, user.id)
        if not assigned:
            raise ValidationError("No profile assigned to this user", field="profile_id")
        profile, _ = assigned

        update = ProgressUpdate(
            user_id=user.id,
            profile_id=profile.id,
            **update_data.model_dump()
        )
        db.add(update)
        await db.commit()
        await db.refresh(update)

        logger.info(
            f"Progress update {update.id} by user {user.id} for {update.date}: "
            f"fetched {update.jobs_fetched}, applied {update.jobs_applied}"
        )
        return update


progress_service = ProgressService()
