from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, EmailStr, field_validator
from skillswap.models.user import Availability, UserRole

def _dedupe(values: Optional[List[str]]) -> Optional[List[str]]:
    if values is None:
        return None
    return list(dict.fromkeys(values))

class UserBase(BaseModel):
    email: EmailStr
    name: str
    location: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name is required")
        return v.strip()

class UserCreate(UserBase):
    password: str

    @field_validator("password")
    @classmethod
    def password_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Password is required")
        return v

class UserLogin(BaseModel):
    email: EmailStr
    password: str

class UserUpdate(BaseModel):
    name: Optional[str] = None
    location: Optional[str] = None
    profile_photo: Optional[str] = None
    bio: Optional[str] = None
    is_public: Optional[bool] = None
    availability: Optional[List[Availability]] = None

    @field_validator("availability")
    @classmethod
    def dedupe_availability(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return _dedupe(v)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip() if v is not None else v

class UserResponse(BaseModel):
    id: int
    email: str
    name: str
    location: Optional[str] = None
    profile_photo: Optional[str] = None
    bio: Optional[str] = None
    is_public: bool
    availability: List[Availability]
    role: UserRole
    is_banned: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class AuthResponse(BaseModel):
    user: UserResponse
    access_token: str
    token_type: str = "bearer"
