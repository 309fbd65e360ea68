from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from skillswap.core.config import settings
from skillswap.db.database import get_db
from skillswap.db.store import Database
from skillswap.models.user import User
from skillswap.schemas.token import TokenPayload
from skillswap.services.auth_service import AuthService

oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_V1_STR}/auth/login", auto_error=False)


async def get_token_payload(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Database = Depends(get_db)
) -> TokenPayload:
    """Verify the bearer token and return its claims."""
    _, payload = await AuthService.resolve_token(db, token)
    return payload


async def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Database = Depends(get_db)
) -> User:
    """Get current user from access token."""
    user, _ = await AuthService.resolve_token(db, token)
    return user


async def get_current_active_user(
    current_user: User = Depends(get_current_user)
) -> User:
    """Get current user, rejecting banned accounts."""
    return AuthService.require_active(current_user)


async def get_current_admin_user(
    current_user: User = Depends(get_current_active_user),
) -> User:
    """Get current admin user."""
    return AuthService.require_admin(current_user)
