from typing import Any, List, Optional

from fastapi import APIRouter, Depends, status

from skillswap.api.dependencies import get_current_admin_user
from skillswap.db.database import get_db
from skillswap.db.store import Database
from skillswap.models.user import User
from skillswap.schemas.base import BaseResponseModel
from skillswap.schemas.message import AdminMessageCreate, AdminMessageResponse, AdminMessageUpdate
from skillswap.schemas.skill import SkillResponse, SkillReview
from skillswap.schemas.swap_request import SwapRequestResponse, SwapRequestReview
from skillswap.schemas.user import UserResponse
from skillswap.services.message_service import AdminMessageService
from skillswap.services.skill_service import SkillService
from skillswap.services.swap_request_service import SwapRequestService
from skillswap.services.user_service import UserService

router = APIRouter()


# Users

@router.get("/users", response_model=BaseResponseModel[List[UserResponse]])
async def read_all_users(
    current_user: User = Depends(get_current_admin_user),
    db: Database = Depends(get_db)
) -> Any:
    """Every account, banned ones included."""
    users = await UserService.list_all_users(db)
    return BaseResponseModel(code=status.HTTP_200_OK, message="Success", data=users, meta={"count": len(users)})


@router.post("/users/{user_id}/ban", response_model=BaseResponseModel[UserResponse])
async def ban_user(
    user_id: int,
    current_user: User = Depends(get_current_admin_user),
    db: Database = Depends(get_db)
) -> Any:
    user = await UserService.set_banned(db, current_user, user_id, True)
    return BaseResponseModel(code=status.HTTP_200_OK, message="User banned successfully", data=user)


@router.post("/users/{user_id}/unban", response_model=BaseResponseModel[UserResponse])
async def unban_user(
    user_id: int,
    current_user: User = Depends(get_current_admin_user),
    db: Database = Depends(get_db)
) -> Any:
    user = await UserService.set_banned(db, current_user, user_id, False)
    return BaseResponseModel(code=status.HTTP_200_OK, message="User unbanned successfully", data=user)


@router.delete("/users/{user_id}", response_model=BaseResponseModel[UserResponse])
async def delete_user(
    user_id: int,
    current_user: User = Depends(get_current_admin_user),
    db: Database = Depends(get_db)
) -> Any:
    user = await UserService.delete_user(db, current_user, user_id)
    return BaseResponseModel(code=status.HTTP_200_OK, message="User deleted successfully", data=user)


# Skills

@router.get("/skills", response_model=BaseResponseModel[List[SkillResponse]])
async def read_pending_skills(
    current_user: User = Depends(get_current_admin_user),
    db: Database = Depends(get_db)
) -> Any:
    """Skills waiting for approval."""
    skills = await SkillService.list_pending(db)
    return BaseResponseModel(code=status.HTTP_200_OK, message="Success", data=skills)


@router.put("/skills/{skill_id}", response_model=BaseResponseModel[Optional[SkillResponse]])
async def review_skill(
    skill_id: int,
    review_in: SkillReview,
    current_user: User = Depends(get_current_admin_user),
    db: Database = Depends(get_db)
) -> Any:
    skill = await SkillService.review_skill(db, current_user, skill_id, review_in.action)
    # rejected skills are removed, so the response carries no data
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Skill approved" if review_in.action == "approve" else "Skill rejected",
        data=skill if review_in.action == "approve" else None
    )


# Swap requests

@router.get("/swap-requests", response_model=BaseResponseModel[List[SwapRequestResponse]])
async def read_all_swap_requests(
    current_user: User = Depends(get_current_admin_user),
    db: Database = Depends(get_db)
) -> Any:
    requests = await SwapRequestService.list_all(db)
    return BaseResponseModel(code=status.HTTP_200_OK, message="Success", data=requests, meta={"count": len(requests)})


@router.put("/swap-requests/{request_id}", response_model=BaseResponseModel[SwapRequestResponse])
async def review_swap_request(
    request_id: int,
    review_in: SwapRequestReview,
    current_user: User = Depends(get_current_admin_user),
    db: Database = Depends(get_db)
) -> Any:
    """Moderate a swap request: approve, reject or flag."""
    swap_request = await SwapRequestService.review_request(db, current_user, request_id, review_in.action)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message=f"Swap request {swap_request.status}",
        data=swap_request
    )


# Platform messages

@router.get("/messages", response_model=BaseResponseModel[List[AdminMessageResponse]])
async def read_admin_messages(
    current_user: User = Depends(get_current_admin_user),
    db: Database = Depends(get_db)
) -> Any:
    messages = await AdminMessageService.list_all(db)
    return BaseResponseModel(code=status.HTTP_200_OK, message="Success", data=messages)


@router.post("/messages", response_model=BaseResponseModel[AdminMessageResponse], status_code=status.HTTP_201_CREATED)
async def create_admin_message(
    message_in: AdminMessageCreate,
    current_user: User = Depends(get_current_admin_user),
    db: Database = Depends(get_db)
) -> Any:
    message = await AdminMessageService.create_message(db, current_user, message_in)
    return BaseResponseModel(code=status.HTTP_201_CREATED, message="Message created", data=message)


@router.put("/messages/{message_id}", response_model=BaseResponseModel[AdminMessageResponse])
async def update_admin_message(
    message_id: int,
    message_in: AdminMessageUpdate,
    current_user: User = Depends(get_current_admin_user),
    db: Database = Depends(get_db)
) -> Any:
    message = await AdminMessageService.update_message(db, current_user, message_id, message_in)
    return BaseResponseModel(code=status.HTTP_200_OK, message="Message updated", data=message)


@router.delete("/messages/{message_id}", response_model=BaseResponseModel[AdminMessageResponse])
async def delete_admin_message(
    message_id: int,
    current_user: User = Depends(get_current_admin_user),
    db: Database = Depends(get_db)
) -> Any:
    message = await AdminMessageService.delete_message(db, current_user, message_id)
    return BaseResponseModel(code=status.HTTP_200_OK, message="Message deleted", data=message)
