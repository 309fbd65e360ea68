from typing import Any

from fastapi import APIRouter, Depends, status

from skillswap.api.dependencies import get_current_user, get_token_payload
from skillswap.db.database import get_db
from skillswap.db.store import Database
from skillswap.models.user import User
from skillswap.schemas.base import BaseResponseModel
from skillswap.schemas.token import TokenPayload
from skillswap.schemas.user import AuthResponse, UserCreate, UserLogin, UserResponse
from skillswap.services.auth_service import AuthService

router = APIRouter()

@router.post("/register", response_model=BaseResponseModel[AuthResponse], status_code=status.HTTP_201_CREATED)
async def register(
    user_in: UserCreate,
    db: Database = Depends(get_db)
) -> Any:
    """Register a new user and sign them in."""
    user, access_token = await AuthService.register(db, user_in)
    return BaseResponseModel(
        code=status.HTTP_201_CREATED,
        message="User registered successfully",
        data=AuthResponse(user=UserResponse.model_validate(user.model_dump()), access_token=access_token),
    )

@router.post("/login", response_model=BaseResponseModel[AuthResponse])
async def login(
    credentials: UserLogin,
    db: Database = Depends(get_db)
) -> Any:
    """Exchange email and password for an access token."""
    user, access_token = await AuthService.login(db, credentials.email, credentials.password)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Login successful",
        data=AuthResponse(user=UserResponse.model_validate(user.model_dump()), access_token=access_token),
    )

@router.post("/logout", response_model=BaseResponseModel[str])
async def logout(
    payload: TokenPayload = Depends(get_token_payload),
    db: Database = Depends(get_db)
) -> Any:
    """Revoke the token used for this request."""
    await AuthService.logout(db, payload)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Logout successful",
        data="Token revoked successfully"
    )

@router.get("/me", response_model=BaseResponseModel[UserResponse])
async def read_current_user(
    current_user: User = Depends(get_current_user)
) -> Any:
    """Get the user the token belongs to."""
    return BaseResponseModel(code=status.HTTP_200_OK, message="Success", data=current_user)
