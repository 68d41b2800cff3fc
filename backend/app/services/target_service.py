"""
Target Service - job fetch/apply goals per user and profile
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from typing import Optional, List

from app.core.exceptions import TargetNotFoundError, ValidationError
from app.core.logging_config import logger
from app.models.profile import Profile
from app.models.target import Target
from app.models.user import User
from app.schemas.target import TargetCreate, TargetUpdate


class TargetService:
    """Service for targets"""

    async def list_targets(self, db: AsyncSession, user_id: Optional[int] = None) -> List[Target]:
        query = (
            select(Target)
            .options(selectinload(Target.user), selectinload(Target.profile))
            .order_by(Target.id)
        )
        if user_id is not None:
            query = query.where(Target.user_id == user_id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def create_target(self, db: AsyncSession, target_data: TargetCreate) -> Target:
        if not await db.get(User, target_data.user_id):
            raise ValidationError("User not found", field="user_id")
        if not await db.get(Profile, target_data.profile_id):
            raise ValidationError("Profile not found", field="profile_id")

        target = Target(**target_data.model_dump())
        db.add(target)
        await db.commit()
        await db.refresh(target)

        logger.info(
            f"Created target {target.id} for user {target.user_id}: "
            f"fetch {target.jobs_to_fetch}, apply {target.jobs_to_apply} "
            f"({target.start_date} to {target.end_date})"
        )
        return target

    async def _get_target(self, db: AsyncSession, target_id: int) -> Target:
        target = await db.get(Target, target_id)
        if not target:
            raise TargetNotFoundError(target_id)
        return target

    async def update_target(self, db: AsyncSession, target_id: int, target_data: TargetUpdate) -> Target:
        target = await self._get_target(db, target_id)
        target.jobs_to_fetch = target_data.jobs_to_fetch
        target.jobs_to_apply = target_data.jobs_to_apply

        await db.commit()
        await db.refresh(target)
        return target

    async def delete_target(self, db: AsyncSession, target_id: int) -> None:
        target = await self._get_target(db, target_id)
        await db.delete(target)
        await db.commit()
        logger.info(f"Deleted target {target_id}")


target_service = TargetService()
