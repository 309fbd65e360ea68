from datetime import datetime
from typing import Literal
from pydantic import BaseModel

AdminMessageType = Literal["announcement", "update", "maintenance"]

class AdminMessage(BaseModel):
    """Platform-wide broadcast written by an admin."""
    id: int
    admin_id: int
    title: str
    content: str
    type: AdminMessageType = "announcement"
    is_active: bool = True
    created_at: datetime
    updated_at: datetime

class Message(BaseModel):
    """Direct message between two users."""
    id: int
    sender_id: int
    receiver_id: int
    content: str
    is_read: bool = False
    created_at: datetime
    updated_at: datetime
