import logging
from typing import List, Optional

from skillswap.core.exceptions import NotFound, ValidationFailed
from skillswap.db.store import Database
from skillswap.models.user import User
from skillswap.schemas.user import UserUpdate

logger = logging.getLogger(__name__)

# Profile fields that may not be cleared to null
REQUIRED_PROFILE_FIELDS = {"name", "is_public", "availability"}


class UserService:
    @staticmethod
    async def list_public_users(db: Database, skill: Optional[str] = None) -> List[User]:
        """Public, non-banned users, optionally narrowed to those with a matching approved skill."""
        users = [user for user in db.users.find_all() if user.is_public]
        if skill:
            needle = skill.lower()
            owner_ids = {s.user_id for s in db.skills.find_all() if needle in s.name.lower()}
            users = [user for user in users if user.id in owner_ids]
        return users

    @staticmethod
    async def get_visible_user(db: Database, user_id: int, viewer: User) -> User:
        """Look up a profile the way another user sees it."""
        user = db.users.find_by_id(user_id)
        if not user:
            raise NotFound("User not found")
        if viewer.id != user.id and not viewer.is_admin and (user.is_banned or not user.is_public):
            raise NotFound("User not found")
        return user

    @staticmethod
    async def update_profile(db: Database, user: User, user_in: UserUpdate) -> User:
        """Update the caller's own profile fields."""
        update_data = {
            field: value
            for field, value in user_in.model_dump(exclude_unset=True).items()
            if value is not None or field not in REQUIRED_PROFILE_FIELDS
        }
        updated = db.users.update(user.id, **update_data)
        if not updated:
            raise NotFound("User not found")
        logger.info(f"User {user.id} updated profile fields {sorted(update_data)}")
        return updated

    @staticmethod
    async def list_all_users(db: Database) -> List[User]:
        """Every account, banned ones included. Admin view."""
        return db.users.all()

    @staticmethod
    async def set_banned(db: Database, admin: User, user_id: int, banned: bool) -> User:
        if user_id == admin.id:
            raise ValidationFailed("Cannot ban own account")
        user = db.users.update(user_id, is_banned=banned)
        if not user:
            raise NotFound("User not found")
        logger.info(f"Admin {admin.id} {'banned' if banned else 'unbanned'} user {user_id}")
        return user

    @staticmethod
    async def delete_user(db: Database, admin: User, user_id: int) -> User:
        """Delete a user together with the skills they listed."""
        if user_id == admin.id:
            raise ValidationFailed("Cannot delete own account")
        user = db.users.delete(user_id)
        if not user:
            raise NotFound("User not found")
        removed_skills = db.skills.delete_where(lambda skill: skill.user_id == user_id)
        logger.info(f"Admin {admin.id} deleted user {user_id} and {removed_skills} skills")
        return user
