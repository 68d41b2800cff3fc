from fastapi import APIRouter, Depends, status, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.exceptions import AuthenticationError, AuthorizationError, DuplicateUsernameError
from app.core.security import create_token_pair, decode_token
from app.core.logging_config import logger, set_user_id
from app.core.rate_limiter import auth_rate_limit, register_rate_limit
from app.models.user import User
from app.schemas.auth import (
    UserRegister,
    UserLogin,
    Token,
    LoginResponse,
    UserResponse,
    RefreshTokenRequest,
)
from app.modules.auth.dependencies import get_current_user
from app.services.user_service import user_service


router = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@register_rate_limit()
async def register(
    request: Request,
    user_data: UserRegister,
    db: AsyncSession = Depends(get_db)
):
    """Register new team member"""
    client_ip = request.client.host if request.client else "unknown"

    try:
        user = await user_service.create_user(db, user_data)
    except DuplicateUsernameError:
        logger.log_auth_event(
            event="register",
            success=False,
            username=user_data.username,
            reason="Username already exists",
            client_ip=client_ip
        )
        raise

    logger.log_auth_event(
        event="register",
        success=True,
        username=user.username,
        client_ip=client_ip,
        user_role=user.role.value
    )
    return user


@router.post("/login", response_model=LoginResponse)
@auth_rate_limit()
async def login(
    request: Request,
    credentials: UserLogin,
    db: AsyncSession = Depends(get_db)
):
    """Exchange username and password for a token pair"""
    client_ip = request.client.host if request.client else "unknown"

    user = await user_service.authenticate(db, credentials.username, credentials.password)
    if not user:
        logger.log_auth_event(
            event="login",
            success=False,
            username=credentials.username,
            reason="Invalid credentials",
            client_ip=client_ip
        )
        raise AuthenticationError("Invalid username or password")

    if not user.is_active:
        logger.log_auth_event(
            event="login",
            success=False,
            username=user.username,
            reason="Account inactive",
            client_ip=client_ip
        )
        raise AuthorizationError("Account is inactive")

    await user_service.record_login(db, user)
    set_user_id(str(user.id))

    logger.log_auth_event(
        event="login",
        success=True,
        username=user.username,
        client_ip=client_ip,
        user_role=user.role.value
    )

    return {**create_token_pair(user), "user": UserResponse.model_validate(user)}


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    return current_user


@router.post("/refresh", response_model=Token)
async def refresh_token(
    token_request: RefreshTokenRequest,
    request: Request,
    db: AsyncSession = Depends(get_db)
):
    """Refresh access token using refresh token"""
    client_ip = request.client.host if request.client else "unknown"

    payload = decode_token(token_request.refresh_token)

    if payload.get("type") != "refresh":
        logger.log_auth_event(
            event="token_refresh",
            success=False,
            reason="Invalid token type",
            client_ip=client_ip
        )
        raise AuthenticationError("Invalid token type - expected refresh token")

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        logger.log_auth_event(
            event="token_refresh",
            success=False,
            reason="Invalid user ID format",
            client_ip=client_ip
        )
        raise AuthenticationError("Invalid user ID format")

    user = await user_service.get_user(db, user_id)
    if not user:
        logger.log_auth_event(
            event="token_refresh",
            success=False,
            reason="User not found",
            client_ip=client_ip
        )
        raise AuthenticationError("User not found")

    if not user.is_active:
        logger.log_auth_event(
            event="token_refresh",
            success=False,
            username=user.username,
            reason="Account inactive",
            client_ip=client_ip
        )
        raise AuthorizationError("Account is inactive")

    logger.log_auth_event(
        event="token_refresh",
        success=True,
        username=user.username,
        client_ip=client_ip
    )
    return create_token_pair(user)


@router.post("/logout")
async def logout(current_user: User = Depends(get_current_user)):
    """
    Logout user.

    JWT tokens are stateless, so this only logs the event; the client
    discards its tokens.
    """
    logger.log_auth_event(
        event="logout",
        success=True,
        username=current_user.username
    )
    return {"message": "Successfully logged out", "success": True}
