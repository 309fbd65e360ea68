from typing import Any, List, Optional

from fastapi import APIRouter, Depends, status

from skillswap.api.dependencies import get_current_active_user
from skillswap.db.database import get_db
from skillswap.db.store import Database
from skillswap.models.user import User
from skillswap.schemas.base import BaseResponseModel
from skillswap.schemas.skill import SkillCreate, SkillResponse
from skillswap.services.skill_service import SkillService

router = APIRouter()


@router.get("", response_model=BaseResponseModel[List[SkillResponse]])
async def read_skills(
    user_id: Optional[int] = None,
    db: Database = Depends(get_db)
) -> Any:
    """List approved skills."""
    skills = await SkillService.list_skills(db, user_id)
    return BaseResponseModel(code=status.HTTP_200_OK, message="Success", data=skills)


@router.get("/me", response_model=BaseResponseModel[List[SkillResponse]])
async def read_own_skills(
    current_user: User = Depends(get_current_active_user),
    db: Database = Depends(get_db)
) -> Any:
    """List the caller's skills, including ones waiting for approval."""
    skills = await SkillService.list_own_skills(db, current_user)
    return BaseResponseModel(code=status.HTTP_200_OK, message="Success", data=skills)


@router.post("", response_model=BaseResponseModel[SkillResponse], status_code=status.HTTP_201_CREATED)
async def create_skill(
    skill_in: SkillCreate,
    current_user: User = Depends(get_current_active_user),
    db: Database = Depends(get_db)
) -> Any:
    skill = await SkillService.create_skill(db, current_user, skill_in)
    return BaseResponseModel(
        code=status.HTTP_201_CREATED,
        message="Skill created" if skill.is_approved else "Skill submitted for approval",
        data=skill
    )


@router.delete("/{skill_id}", response_model=BaseResponseModel[SkillResponse])
async def delete_skill(
    skill_id: int,
    current_user: User = Depends(get_current_active_user),
    db: Database = Depends(get_db)
) -> Any:
    skill = await SkillService.delete_skill(db, current_user, skill_id)
    return BaseResponseModel(code=status.HTTP_200_OK, message="Skill deleted", data=skill)
