import logging
from typing import List, Optional

from skillswap.core.config import settings
from skillswap.core.exceptions import AuthorizationDenied, NotFound, ValidationFailed
from skillswap.db.store import Database
from skillswap.models.skill import Skill
from skillswap.models.user import User
from skillswap.schemas.skill import SkillCreate

logger = logging.getLogger(__name__)


class SkillService:
    @staticmethod
    async def list_skills(db: Database, user_id: Optional[int] = None) -> List[Skill]:
        """Approved skills, optionally for one owner."""
        skills = db.skills.find_all()
        if user_id is not None:
            skills = [skill for skill in skills if skill.user_id == user_id]
        return skills

    @staticmethod
    async def list_own_skills(db: Database, user: User) -> List[Skill]:
        return db.skills.find_by_user_id(user.id)

    @staticmethod
    async def create_skill(db: Database, user: User, skill_in: SkillCreate) -> Skill:
        name = skill_in.name.strip()
        duplicate = next(
            (
                skill for skill in db.skills.find_by_user_id(user.id)
                if skill.name.lower() == name.lower() and skill.type == skill_in.type
            ),
            None,
        )
        if duplicate:
            raise ValidationFailed("You already have this skill in your list")

        skill = db.skills.create(
            user_id=user.id,
            name=name,
            type=skill_in.type,
            description=(skill_in.description or "").strip(),
            is_approved=not settings.SKILLS_REQUIRE_APPROVAL,
        )
        logger.info(f"User {user.id} added {skill.type} skill {skill.id} (approved={skill.is_approved})")
        return skill

    @staticmethod
    async def delete_skill(db: Database, user: User, skill_id: int) -> Skill:
        skill = db.skills.find_by_id(skill_id)
        if not skill:
            raise NotFound("Skill not found")
        if skill.user_id != user.id:
            raise AuthorizationDenied("Unauthorized")
        db.skills.delete(skill_id)
        logger.info(f"User {user.id} deleted skill {skill_id}")
        return skill

    @staticmethod
    async def list_pending(db: Database) -> List[Skill]:
        return db.skills.find_pending()

    @staticmethod
    async def review_skill(db: Database, admin: User, skill_id: int, action: str) -> Optional[Skill]:
        """Approve keeps the skill and publishes it; reject removes it."""
        if action not in ("approve", "reject"):
            raise ValidationFailed("Invalid action")
        if not db.skills.find_by_id(skill_id):
            raise NotFound("Skill not found")

        if action == "approve":
            skill = db.skills.update(skill_id, is_approved=True)
            logger.info(f"Admin {admin.id} approved skill {skill_id}")
        else:
            skill = db.skills.delete(skill_id)
            logger.info(f"Admin {admin.id} rejected skill {skill_id}")
        return skill
