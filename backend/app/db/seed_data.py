"""
Database Seed Data Module

Default candidate profiles created on first start.
Run with: python -m app.db.seed_data
"""
import asyncio

from sqlalchemy import select, func, delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import AsyncSessionLocal, init_db
from app.core.logging_config import logger
from app.models import (
    LeadEntry,
    LeadGenAssignment,
    Profile,
    ProgressUpdate,
    SalesAssignment,
    Target,
    User,
)


DEFAULT_PROFILES = [
    {"name": "Software Engineer", "description": "Full-stack developer with 5 years of experience in React, Node.js, and AWS."},
    {"name": "UX Designer", "description": "Designer with expertise in user research, wireframing, and prototyping."},
    {"name": "Project Manager", "description": "PMP certified manager with experience leading agile teams."},
    {"name": "Marketing Specialist", "description": "Digital marketing expert with SEO and content creation skills."},
    {"name": "Data Analyst", "description": "Skilled in data visualization, SQL, and statistical analysis."},
]


async def seed_default_profiles(db: AsyncSession) -> int:
    """Create the default profiles when the table is empty; returns how many were added"""
    existing = await db.scalar(select(func.count(Profile.id)))
    if existing:
        return 0

    for data in DEFAULT_PROFILES:
        db.add(Profile(**data))
    await db.commit()

    logger.info(f"Seeded {len(DEFAULT_PROFILES)} default profiles")
    return len(DEFAULT_PROFILES)


async def seed_all():
    await init_db()
    async with AsyncSessionLocal() as db:
        await seed_default_profiles(db)


async def clear_all():
    """Clear all data from database"""
    async with AsyncSessionLocal() as db:
        # Delete in reverse order of dependencies
        for model in (LeadEntry, ProgressUpdate, Target, SalesAssignment, LeadGenAssignment, Profile, User):
            await db.execute(delete(model))
        await db.commit()
    logger.info("Cleared all data")


if __name__ == "__main__":
    import sys

    if len(sys.argv) > 1 and sys.argv[1] == "clear":
        asyncio.run(clear_all())
    else:
        asyncio.run(seed_all())
