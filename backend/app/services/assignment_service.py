"""
Assignment Service - links profiles to team members

Lead generation users work exactly one profile (assigning again replaces
it). Sales coordinators can hold any number of profiles.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from typing import Optional, List, Tuple

from app.core.exceptions import AssignmentNotFoundError, InvalidAssignmentError
from app.core.logging_config import logger
from app.models.assignment import LeadGenAssignment, SalesAssignment
from app.models.profile import Profile
from app.models.target import Target
from app.models.user import User, UserRole


class AssignmentService:
    """Service for lead generation and sales assignments"""

    async def _validate(self, db: AsyncSession, user_id: int, profile_id: int, role: UserRole) -> None:
        user = await db.get(User, user_id)
        if not user:
            raise InvalidAssignmentError("User not found", field="user_id")
        if user.role != role:
            raise InvalidAssignmentError(f"User must have role {role.value}", field="user_id")

        if not await db.get(Profile, profile_id):
            raise InvalidAssignmentError("Profile not found", field="profile_id")

    # ==================== LEAD GENERATION ====================

    async def list_lead_gen_assignments(self, db: AsyncSession) -> List[LeadGenAssignment]:
        result = await db.execute(
            select(LeadGenAssignment)
            .options(selectinload(LeadGenAssignment.user), selectinload(LeadGenAssignment.profile))
            .order_by(LeadGenAssignment.id)
        )
        return list(result.scalars().all())

    async def get_lead_gen_assignment(self, db: AsyncSession, user_id: int) -> Optional[LeadGenAssignment]:
        result = await db.execute(
            select(LeadGenAssignment).where(LeadGenAssignment.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def assign_lead_gen(self, db: AsyncSession, user_id: int, profile_id: int) -> LeadGenAssignment:
        """Create the user's assignment or move it to another profile"""
        await self._validate(db, user_id, profile_id, UserRole.LEAD_GEN)

        assignment = await self.get_lead_gen_assignment(db, user_id)
        if assignment:
            logger.info(
                f"Reassigning lead gen user {user_id} from profile {assignment.profile_id} to {profile_id}"
            )
            assignment.profile_id = profile_id
        else:
            assignment = LeadGenAssignment(user_id=user_id, profile_id=profile_id)
            db.add(assignment)
            logger.info(f"Assigned profile {profile_id} to lead gen user {user_id}")

        await db.commit()
        await db.refresh(assignment)
        return assignment

    async def remove_lead_gen_assignment(self, db: AsyncSession, user_id: int) -> None:
        assignment = await self.get_lead_gen_assignment(db, user_id)
        if not assignment:
            raise AssignmentNotFoundError(user_id)

        await db.delete(assignment)
        await db.commit()
        logger.info(f"Removed lead gen assignment for user {user_id}")

    # ==================== SALES ====================

    async def list_sales_assignments(self, db: AsyncSession, user_id: Optional[int] = None) -> List[SalesAssignment]:
        query = (
            select(SalesAssignment)
            .options(selectinload(SalesAssignment.user), selectinload(SalesAssignment.profile))
            .order_by(SalesAssignment.id)
        )
        if user_id is not None:
            query = query.where(SalesAssignment.user_id == user_id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def assign_sales(self, db: AsyncSession, user_id: int, profile_id: int) -> SalesAssignment:
        """Assign a profile to a sales user; an existing pair is returned as is"""
        await self._validate(db, user_id, profile_id, UserRole.SALES)

        result = await db.execute(
            select(SalesAssignment).where(
                SalesAssignment.user_id == user_id,
                SalesAssignment.profile_id == profile_id,
            )
        )
        existing = result.scalar_one_or_none()
        if existing:
            return existing

        assignment = SalesAssignment(user_id=user_id, profile_id=profile_id)
        db.add(assignment)
        await db.commit()
        await db.refresh(assignment)

        logger.info(f"Assigned profile {profile_id} to sales user {user_id}")
        return assignment

    async def remove_sales_assignment(self, db: AsyncSession, assignment_id: int) -> None:
        assignment = await db.get(SalesAssignment, assignment_id)
        if not assignment:
            raise AssignmentNotFoundError(assignment_id)

        await db.delete(assignment)
        await db.commit()
        logger.info(f"Removed sales assignment {assignment_id}")

    # ==================== CALLER VIEWS ====================

    async def get_latest_target(self, db: AsyncSession, user_id: int) -> Optional[Target]:
        """Target with the latest end date; ties go to the newest row"""
        result = await db.execute(
            select(Target)
            .where(Target.user_id == user_id)
            .order_by(Target.end_date.desc(), Target.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def get_user_assigned_profile(
        self,
        db: AsyncSession,
        user_id: int
    ) -> Optional[Tuple[Profile, Optional[Target]]]:
        """Assigned profile and current target of a lead generation user"""
        result = await db.execute(
            select(LeadGenAssignment)
            .options(selectinload(LeadGenAssignment.profile))
            .where(LeadGenAssignment.user_id == user_id)
        )
        assignment = result.scalar_one_or_none()
        if not assignment or not assignment.profile:
            return None

        target = await self.get_latest_target(db, user_id)
        return assignment.profile, target

    async def get_user_assigned_profiles(self, db: AsyncSession, user_id: int) -> List[Profile]:
        """Profiles assigned to a sales user"""
        result = await db.execute(
            select(Profile)
            .join(SalesAssignment, SalesAssignment.profile_id == Profile.id)
            .where(SalesAssignment.user_id == user_id)
            .order_by(SalesAssignment.id)
        )
        return list(result.scalars().all())

    async def can_access_profile(self, db: AsyncSession, user: User, profile_id: int) -> bool:
        """Managers see every profile; others only what is assigned to them"""
        if user.role == UserRole.MANAGER:
            return True

        if user.role == UserRole.LEAD_GEN:
            assignment = await self.get_lead_gen_assignment(db, user.id)
            return assignment is not None and assignment.profile_id == profile_id

        if user.role == UserRole.SALES:
            result = await db.execute(
                select(SalesAssignment.id).where(
                    SalesAssignment.user_id == user.id,
                    SalesAssignment.profile_id == profile_id,
                )
            )
            return result.first() is not None

        return False


assignment_service = AssignmentService()
