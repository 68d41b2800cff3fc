"""
Profile Service - CRUD for candidate profiles

Deleting a profile removes its assignments and targets. Profiles that
already have progress updates or lead entries are kept, since those rows
feed the reports.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func
from typing import List

from app.core.exceptions import ConflictError, ProfileNotFoundError
from app.core.logging_config import logger
from app.models.assignment import LeadGenAssignment, SalesAssignment
from app.models.lead_entry import LeadEntry
from app.models.profile import Profile
from app.models.progress_update import ProgressUpdate
from app.models.target import Target
from app.schemas.profile import ProfileCreate, ProfileUpdate


class ProfileService:
    """Service for candidate profiles"""

    async def list_profiles(self, db: AsyncSession) -> List[Profile]:
        result = await db.execute(select(Profile).order_by(Profile.id))
        return list(result.scalars().all())

    async def get_profile(self, db: AsyncSession, profile_id: int) -> Profile:
        result = await db.execute(select(Profile).where(Profile.id == profile_id))
        profile = result.scalar_one_or_none()
        if not profile:
            raise ProfileNotFoundError(profile_id)
        return profile

    async def create_profile(self, db: AsyncSession, profile_data: ProfileCreate, created_by: int) -> Profile:
        profile = Profile(**profile_data.model_dump(), created_by=created_by)
        db.add(profile)
        await db.commit()
        await db.refresh(profile)

        logger.info(f"Created profile {profile.id} '{profile.name}' by user {created_by}")
        return profile

    async def update_profile(self, db: AsyncSession, profile_id: int, profile_data: ProfileUpdate) -> Profile:
        profile = await self.get_profile(db, profile_id)

        for field, value in profile_data.model_dump(exclude_unset=True).items():
            setattr(profile, field, value)

        await db.commit()
        await db.refresh(profile)
        return profile

    async def delete_profile(self, db: AsyncSession, profile_id: int) -> None:
        profile = await self.get_profile(db, profile_id)

        progress_count = await db.scalar(
            select(func.count(ProgressUpdate.id)).where(ProgressUpdate.profile_id == profile_id)
        )
        lead_count = await db.scalar(
            select(func.count(LeadEntry.id)).where(LeadEntry.profile_id == profile_id)
        )
        if progress_count or lead_count:
            raise ConflictError(
                "Profile has recorded progress or lead entries and cannot be deleted",
                details={
                    "profile_id": profile_id,
                    "progress_updates": progress_count,
                    "lead_entries": lead_count,
                }
            )

        await db.execute(delete(LeadGenAssignment).where(LeadGenAssignment.profile_id == profile_id))
        await db.execute(delete(SalesAssignment).where(SalesAssignment.profile_id == profile_id))
        await db.execute(delete(Target).where(Target.profile_id == profile_id))
        await db.delete(profile)
        await db.commit()

        logger.info(f"Deleted profile {profile_id}")


profile_service = ProfileService()
