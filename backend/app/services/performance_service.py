"""
Performance Service - per-user progress against the current target
"""

from sqlalchemy.ext.asyncio import AsyncSession
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, List

from app.models.user import UserRole
from app.schemas.performance import TeamPerformanceRow
from app.services.assignment_service import assignment_service
from app.services.progress_service import progress_service
from app.services.user_service import user_service


def completion_percent(applied: int, target: int) -> int:
    """Applied as a whole percentage of target, halves rounded up; 0 without a target"""
    if target <= 0:
        return 0
    ratio = Decimal(applied * 100) / Decimal(target)
    return int(ratio.quantize(Decimal(1), rounding=ROUND_HALF_UP))


class PerformanceService:
    """Service for the team performance overview"""

    async def get_team_performance(
        self,
        db: AsyncSession,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None
    ) -> List[TeamPerformanceRow]:
        """
        One row per lead generation user with an assigned profile.

        Progress is summed over the inclusive window; the target is the
        user's latest-ending one, or zero when none exists.
        """
        rows = []
        for user in await user_service.list_users(db, role=UserRole.LEAD_GEN):
            assigned = await assignment_service.get_user_assigned_profile(db, user.id)
            if not assigned:
                continue
            profile, target = assigned

            updates = await progress_service.list_progress_updates(
                db, user_id=user.id, from_date=from_date, to_date=to_date, expand=False
            )
            jobs_fetched = sum(update.jobs_fetched for update in updates)
            jobs_applied = sum(update.jobs_applied for update in updates)
            target_fetch = target.jobs_to_fetch if target else 0
            target_apply = target.jobs_to_apply if target else 0

            rows.append(TeamPerformanceRow(
                user_id=user.id,
                name=user.name,
                profile=profile.name,
                target_jobs_to_fetch=target_fetch,
                target_jobs_to_apply=target_apply,
                jobs_fetched=jobs_fetched,
                jobs_applied=jobs_applied,
                completion=completion_percent(jobs_applied, target_apply),
            ))

        return rows


performance_service = PerformanceService()
