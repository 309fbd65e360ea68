from datetime import datetime
from typing import Optional
from pydantic import BaseModel
from skillswap.models.message import AdminMessageType

class MessageCreate(BaseModel):
    receiver_id: Optional[int] = None
    content: Optional[str] = None

class MessageResponse(BaseModel):
    id: int
    sender_id: int
    receiver_id: int
    content: str
    is_read: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class AdminMessageCreate(BaseModel):
    title: str
    content: str
    type: AdminMessageType = "announcement"

class AdminMessageUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    type: Optional[AdminMessageType] = None
    is_active: Optional[bool] = None

class AdminMessageResponse(BaseModel):
    id: int
    admin_id: int
    title: str
    content: str
    type: AdminMessageType
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
