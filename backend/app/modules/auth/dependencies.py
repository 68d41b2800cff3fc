from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import Optional

from app.core.database import get_db
from app.core.exceptions import AuthenticationError, AuthorizationError
from app.core.logging_config import set_user_id
from app.core.security import decode_token
from app.models.user import User, UserRole

security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> User:
    """Get current authenticated user"""
    if credentials is None:
        raise AuthenticationError()

    payload = decode_token(credentials.credentials)

    if payload.get("type") != "access":
        raise AuthenticationError("Invalid token type")

    subject = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        raise AuthenticationError("Invalid token payload")

    result = await db.execute(
        select(User).where(User.id == user_id)
    )
    user = result.scalar_one_or_none()

    if not user:
        raise AuthenticationError("User not found")

    if not user.is_active:
        raise AuthorizationError("User account is inactive")

    set_user_id(str(user.id))
    return user


def require_roles(*roles: UserRole):
    """
    Dependency factory restricting an endpoint to the given roles.

    Usage:
        @router.post("")
        async def create_profile(current_user: User = Depends(require_roles(UserRole.MANAGER))):
            ...
    """
    allowed = set(roles)

    async def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in allowed:
            raise AuthorizationError()
        return current_user

    return role_checker


get_current_manager = require_roles(UserRole.MANAGER)
get_current_lead_gen = require_roles(UserRole.LEAD_GEN)
get_current_sales = require_roles(UserRole.SALES)
