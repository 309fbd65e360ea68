from datetime import datetime
from typing import Literal
from pydantic import BaseModel

SkillType = Literal["offered", "wanted"]

class Skill(BaseModel):
    id: int
    user_id: int
    name: str
    type: SkillType
    description: str = ""
    is_approved: bool = True
    created_at: datetime
