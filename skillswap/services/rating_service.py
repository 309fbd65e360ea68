import logging
from typing import List, Optional

from skillswap.core.exceptions import ValidationFailed
from skillswap.db.store import Database
from skillswap.models.rating import Rating
from skillswap.models.user import User
from skillswap.schemas.rating import RatingCreate, RatingResponse

logger = logging.getLogger(__name__)


class RatingService:
    @staticmethod
    async def list_ratings(db: Database, user_id: Optional[int] = None) -> List[RatingResponse]:
        """All ratings, or the ratings a user received with the rater's name and photo attached."""
        if user_id is None:
            return [RatingResponse(**rating.model_dump()) for rating in db.ratings.find_all()]

        enriched = []
        for rating in db.ratings.find_by_user_id(user_id):
            rater = db.users.find_by_id(rating.rater_id)
            enriched.append(
                RatingResponse(
                    **rating.model_dump(),
                    rater_name=rater.name if rater else "Anonymous User",
                    rater_photo=(rater.profile_photo or "") if rater else "",
                )
            )
        return enriched

    @staticmethod
    def average(ratings: List[RatingResponse]) -> Optional[float]:
        if not ratings:
            return None
        return round(sum(rating.rating for rating in ratings) / len(ratings), 2)

    @staticmethod
    async def create_rating(db: Database, user: User, rating_in: RatingCreate) -> Rating:
        if not rating_in.rated_user_id or not rating_in.rating or not rating_in.swap_request_id:
            raise ValidationFailed("Missing required fields")
        if rating_in.rating < 1 or rating_in.rating > 5:
            raise ValidationFailed("Rating must be between 1 and 5")
        if db.ratings.find_by_rater_and_swap(user.id, rating_in.swap_request_id):
            raise ValidationFailed("You have already rated this swap")

        swap_request = db.swap_requests.find_by_id(rating_in.swap_request_id)
        if not swap_request or not swap_request.involves(user.id):
            raise ValidationFailed("Invalid swap request")
        if swap_request.status != "completed":
            raise ValidationFailed("Can only rate completed swaps")
        if rating_in.rated_user_id != swap_request.counterpart_of(user.id):
            raise ValidationFailed("You can only rate the other participant of the swap")

        text = (rating_in.feedback or rating_in.review or "").strip()
        rating = db.ratings.create(
            swap_request_id=swap_request.id,
            rater_id=user.id,
            rated_user_id=rating_in.rated_user_id,
            rating=rating_in.rating,
            feedback=text,
            review=text,
        )
        logger.info(f"User {user.id} rated user {rating.rated_user_id} for swap request {swap_request.id}")
        return rating
