from datetime import datetime
from typing import Optional
from pydantic import BaseModel, field_validator
from skillswap.models.skill import SkillType

class SkillCreate(BaseModel):
    name: str
    type: SkillType
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Skill name and type are required")
        return v.strip()

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: Optional[str]) -> str:
        return (v or "").strip()

class SkillResponse(BaseModel):
    id: int
    user_id: int
    name: str
    type: SkillType
    description: str
    is_approved: bool
    created_at: datetime

    class Config:
        from_attributes = True

class SkillReview(BaseModel):
    action: str
