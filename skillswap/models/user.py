from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel

Availability = Literal["weekdays", "weekends", "evenings", "mornings"]
UserRole = Literal["user", "admin"]

class User(BaseModel):
    id: int
    email: str
    name: str
    location: Optional[str] = None
    profile_photo: Optional[str] = None
    bio: Optional[str] = None
    is_public: bool = True
    availability: List[Availability] = []
    role: UserRole = "user"
    is_banned: bool = False
    hashed_password: str = ""
    created_at: datetime
    updated_at: datetime

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
