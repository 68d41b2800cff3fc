"""
User Service - account lookup, registration and credential checks
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from datetime import datetime
from typing import Optional, List

from app.core.exceptions import DuplicateUsernameError
from app.core.logging_config import logger
from app.core.security import get_password_hash, verify_password
from app.models.user import User, UserRole
from app.schemas.auth import UserRegister


class UserService:
    """Service for team member accounts"""

    async def get_user(self, db: AsyncSession, user_id: int) -> Optional[User]:
        result = await db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_user_by_username(self, db: AsyncSession, username: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def list_users(self, db: AsyncSession, role: Optional[UserRole] = None) -> List[User]:
        """All users ordered by id, optionally restricted to one role"""
        query = select(User).order_by(User.id)
        if role is not None:
            query = query.where(User.role == role)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def create_user(self, db: AsyncSession, user_data: UserRegister) -> User:
        if await self.get_user_by_username(db, user_data.username):
            raise DuplicateUsernameError(user_data.username)

        user = User(
            username=user_data.username,
            hashed_password=get_password_hash(user_data.password),
            name=user_data.name,
            email=user_data.email,
            role=user_data.role,
            is_active=True,
        )
        db.add(user)
        await db.commit()
        await db.refresh(user)

        logger.info(f"Created user {user.username} with role {user.role.value}")
        return user

    async def authenticate(self, db: AsyncSession, username: str, password: str) -> Optional[User]:
        """Return the user when the password matches, else None"""
        user = await self.get_user_by_username(db, username)
        if not user or not verify_password(password, user.hashed_password):
            return None
        return user

    async def record_login(self, db: AsyncSession, user: User) -> None:
        user.last_login = datetime.utcnow()
        await db.commit()


user_service = UserService()
