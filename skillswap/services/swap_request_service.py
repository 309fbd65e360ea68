import logging
from typing import Dict, List

from skillswap.core.exceptions import AuthorizationDenied, NotFound, ValidationFailed
from skillswap.db.store import Database
from skillswap.models.swap_request import SwapRequest, can_transition
from skillswap.models.user import User
from skillswap.schemas.swap_request import SwapRequestCreate

logger = logging.getLogger(__name__)

# Admin review actions: target status and the statuses it may be applied to (None = any)
REVIEW_ACTIONS: Dict[str, tuple] = {
    "approve": ("accepted", frozenset({"pending", "flagged"})),
    "reject": ("rejected", frozenset({"pending", "flagged"})),
    "flag": ("flagged", None),
}


class SwapRequestService:
    @staticmethod
    async def list_for_user(db: Database, user: User) -> List[SwapRequest]:
        return db.swap_requests.find_by_user_id(user.id)

    @staticmethod
    async def list_all(db: Database) -> List[SwapRequest]:
        return db.swap_requests.find_all()

    @staticmethod
    async def get_request(db: Database, user: User, request_id: int) -> SwapRequest:
        swap_request = db.swap_requests.find_by_id(request_id)
        if not swap_request:
            raise NotFound("Swap request not found")
        if not swap_request.involves(user.id) and not user.is_admin:
            raise AuthorizationDenied("Unauthorized")
        return swap_request

    @staticmethod
    def _check_skills(db: Database, skill_ids: List[int], owner_id: int, label: str) -> None:
        if not skill_ids:
            raise ValidationFailed(f"At least one {label} skill is required")
        for skill_id in skill_ids:
            skill = db.skills.find_by_id(skill_id)
            if not skill:
                raise NotFound(f"Skill {skill_id} not found")
            if skill.user_id != owner_id:
                raise ValidationFailed(f"Skill {skill_id} cannot be used as a {label} skill")

    @staticmethod
    async def create_request(db: Database, user: User, request_in: SwapRequestCreate) -> SwapRequest:
        if request_in.receiver_id == user.id:
            raise ValidationFailed("Cannot send a swap request to yourself")
        receiver = db.users.find_by_id(request_in.receiver_id)
        if not receiver or receiver.is_banned:
            raise NotFound("Receiver not found")

        SwapRequestService._check_skills(db, request_in.offered_skill_ids, user.id, "offered")
        SwapRequestService._check_skills(db, request_in.wanted_skill_ids, receiver.id, "wanted")

        swap_request = db.swap_requests.create(
            requester_id=user.id,
            receiver_id=receiver.id,
            offered_skill_id=request_in.offered_skill_ids[0],
            wanted_skill_id=request_in.wanted_skill_ids[0],
            offered_skill_ids=request_in.offered_skill_ids,
            wanted_skill_ids=request_in.wanted_skill_ids,
            status="pending",
            message=request_in.message,
        )
        logger.info(f"User {user.id} opened swap request {swap_request.id} with user {receiver.id}")
        return swap_request

    @staticmethod
    async def update_status(db: Database, user: User, request_id: int, status: str) -> SwapRequest:
        """Move a request along the participant state machine."""
        swap_request = db.swap_requests.find_by_id(request_id)
        if not swap_request:
            raise NotFound("Swap request not found")
        if not swap_request.involves(user.id):
            raise AuthorizationDenied("Unauthorized")
        if not can_transition(swap_request.status, status):
            logger.warning(
                f"User {user.id} tried to move swap request {request_id} from {swap_request.status} to {status}"
            )
            raise ValidationFailed(f"Cannot change status from {swap_request.status} to {status}")

        updated = db.swap_requests.update(request_id, status=status)
        logger.info(f"User {user.id} moved swap request {request_id} to {status}")
        return updated

    @staticmethod
    async def delete_request(db: Database, user: User, request_id: int) -> SwapRequest:
        swap_request = db.swap_requests.find_by_id(request_id)
        if not swap_request:
            raise NotFound("Swap request not found")
        if swap_request.requester_id != user.id:
            raise AuthorizationDenied("Unauthorized")
        db.swap_requests.delete(request_id)
        logger.info(f"User {user.id} deleted swap request {request_id}")
        return swap_request

    @staticmethod
    async def review_request(db: Database, admin: User, request_id: int, action: str) -> SwapRequest:
        if action not in REVIEW_ACTIONS:
            raise ValidationFailed("Invalid action")
        swap_request = db.swap_requests.find_by_id(request_id)
        if not swap_request:
            raise NotFound("Swap request not found")

        target, allowed_from = REVIEW_ACTIONS[action]
        if allowed_from is not None and swap_request.status not in allowed_from:
            raise ValidationFailed(f"Cannot {action} a swap request that is {swap_request.status}")

        updated = db.swap_requests.update(request_id, status=target)
        logger.info(f"Admin {admin.id} applied {action} to swap request {request_id}")
        return updated
