"""
Lead Entry Service - daily lead counts by sales coordinators
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from datetime import date
from typing import Optional, List

from app.core.exceptions import AuthorizationError, LeadEntryNotFoundError, ProfileNotAssignedError
from app.core.logging_config import logger
from app.models.lead_entry import LeadEntry
from app.models.user import User
from app.schemas.lead_entry import LeadEntryCreate, LeadEntryUpdate
from app.services.assignment_service import assignment_service


class LeadEntryService:
    """Service for lead entries"""

    async def list_lead_entries(
        self,
        db: AsyncSession,
        user_id: Optional[int] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        expand: bool = True
    ) -> List[LeadEntry]:
        query = select(LeadEntry).order_by(LeadEntry.date, LeadEntry.id)
        if expand:
            query = query.options(selectinload(LeadEntry.user), selectinload(LeadEntry.profile))
        if user_id is not None:
            query = query.where(LeadEntry.user_id == user_id)
        if from_date is not None:
            query = query.where(LeadEntry.date >= from_date)
        if to_date is not None:
            query = query.where(LeadEntry.date <= to_date)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def _ensure_assigned(self, db: AsyncSession, user: User, profile_id: int) -> None:
        profiles = await assignment_service.get_user_assigned_profiles(db, user.id)
        if profile_id not in {profile.id for profile in profiles}:
            raise ProfileNotAssignedError()

    async def create_lead_entry(self, db: AsyncSession, user: User, entry_data: LeadEntryCreate) -> LeadEntry:
        await self._ensure_assigned(db, user, entry_data.profile_id)

        entry = LeadEntry(user_id=user.id, **entry_data.model_dump())
        db.add(entry)
        await db.commit()
        await db.refresh(entry)

        logger.info(
            f"Lead entry {entry.id} by user {user.id} for profile {entry.profile_id} on {entry.date}: "
            f"{entry.new_leads} new leads"
        )
        return entry

    async def update_lead_entry(
        self,
        db: AsyncSession,
        user: User,
        entry_id: int,
        entry_data: LeadEntryUpdate
    ) -> LeadEntry:
        """Partial update; only the author may edit an entry"""
        entry = await db.get(LeadEntry, entry_id)
        if not entry:
            raise LeadEntryNotFoundError(entry_id)
        if entry.user_id != user.id:
            raise AuthorizationError("You can only edit your own lead entries")

        changes = entry_data.model_dump(exclude_unset=True)
        # Explicit nulls cannot clear required columns
        changes = {k: v for k, v in changes.items() if v is not None or k == "notes"}

        if "profile_id" in changes and changes["profile_id"] != entry.profile_id:
            await self._ensure_assigned(db, user, changes["profile_id"])

        for field, value in changes.items():
            setattr(entry, field, value)

        await db.commit()
        await db.refresh(entry)
        return entry


lead_entry_service = LeadEntryService()
