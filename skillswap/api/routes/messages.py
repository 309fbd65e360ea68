from typing import Any, List, Optional

from fastapi import APIRouter, Depends, status

from skillswap.api.dependencies import get_current_active_user
from skillswap.db.database import get_db
from skillswap.db.store import Database
from skillswap.models.user import User
from skillswap.schemas.base import BaseResponseModel
from skillswap.schemas.message import AdminMessageResponse, MessageCreate, MessageResponse
from skillswap.services.message_service import AdminMessageService, MessageService

router = APIRouter()
announcements_router = APIRouter()


@router.get("", response_model=BaseResponseModel[List[MessageResponse]])
async def read_messages(
    conversation_with: Optional[int] = None,
    current_user: User = Depends(get_current_active_user),
    db: Database = Depends(get_db)
) -> Any:
    """The caller's messages, or one conversation."""
    messages = await MessageService.list_messages(db, current_user, conversation_with)
    unread = sum(1 for message in messages if message.receiver_id == current_user.id and not message.is_read)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Success",
        data=messages,
        meta={"count": len(messages), "unread": unread}
    )


@router.post("", response_model=BaseResponseModel[MessageResponse], status_code=status.HTTP_201_CREATED)
async def send_message(
    message_in: MessageCreate,
    current_user: User = Depends(get_current_active_user),
    db: Database = Depends(get_db)
) -> Any:
    message = await MessageService.send_message(db, current_user, message_in)
    return BaseResponseModel(code=status.HTTP_201_CREATED, message="Message sent", data=message)


@router.put("/{message_id}/read", response_model=BaseResponseModel[MessageResponse])
async def mark_message_read(
    message_id: int,
    current_user: User = Depends(get_current_active_user),
    db: Database = Depends(get_db)
) -> Any:
    message = await MessageService.mark_read(db, current_user, message_id)
    return BaseResponseModel(code=status.HTTP_200_OK, message="Message marked as read", data=message)


@announcements_router.get("", response_model=BaseResponseModel[List[AdminMessageResponse]])
async def read_announcements(
    current_user: User = Depends(get_current_active_user),
    db: Database = Depends(get_db)
) -> Any:
    """Active platform messages."""
    messages = await AdminMessageService.list_active(db)
    return BaseResponseModel(code=status.HTTP_200_OK, message="Success", data=messages)
