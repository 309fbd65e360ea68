from typing import Any, List, Optional

from fastapi import APIRouter, Depends, status

from skillswap.api.dependencies import get_current_active_user
from skillswap.db.database import get_db
from skillswap.db.store import Database
from skillswap.models.user import User
from skillswap.schemas.base import BaseResponseModel
from skillswap.schemas.user import UserResponse, UserUpdate
from skillswap.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=BaseResponseModel[List[UserResponse]])
async def read_users(
    skill: Optional[str] = None,
    db: Database = Depends(get_db)
) -> Any:
    """Browse public profiles, optionally by skill name."""
    users = await UserService.list_public_users(db, skill)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Success",
        data=users,
        meta={"count": len(users)}
    )


@router.get("/me", response_model=BaseResponseModel[UserResponse])
async def read_current_user(
    current_user: User = Depends(get_current_active_user)
) -> Any:
    """Get current user information."""
    return BaseResponseModel(code=status.HTTP_200_OK, message="Success", data=current_user)


@router.put("/me", response_model=BaseResponseModel[UserResponse])
async def update_current_user(
    user_in: UserUpdate,
    current_user: User = Depends(get_current_active_user),
    db: Database = Depends(get_db)
) -> Any:
    """Update current user profile."""
    user = await UserService.update_profile(db, current_user, user_in)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Profile updated successfully",
        data=user
    )


@router.get("/{user_id}", response_model=BaseResponseModel[UserResponse])
async def read_user(
    user_id: int,
    current_user: User = Depends(get_current_active_user),
    db: Database = Depends(get_db)
) -> Any:
    """Get one user profile."""
    user = await UserService.get_visible_user(db, user_id, current_user)
    return BaseResponseModel(code=status.HTTP_200_OK, message="Success", data=user)
