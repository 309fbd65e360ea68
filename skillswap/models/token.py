from datetime import datetime
from typing import Optional
from pydantic import BaseModel

class RevokedToken(BaseModel):
    id: int
    jti: str
    user_id: int
    expires_at: datetime
    reason: Optional[str] = None
    created_at: datetime
