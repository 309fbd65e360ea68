from typing import Any, List, Optional

from fastapi import APIRouter, Depends, status

from skillswap.api.dependencies import get_current_active_user
from skillswap.db.database import get_db
from skillswap.db.store import Database
from skillswap.models.user import User
from skillswap.schemas.base import BaseResponseModel
from skillswap.schemas.rating import RatingCreate, RatingResponse
from skillswap.services.rating_service import RatingService

router = APIRouter()


@router.get("", response_model=BaseResponseModel[List[RatingResponse]])
async def read_ratings(
    user_id: Optional[int] = None,
    db: Database = Depends(get_db)
) -> Any:
    """List ratings; with user_id, the ratings that user received."""
    ratings = await RatingService.list_ratings(db, user_id)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Success",
        data=ratings,
        meta={"count": len(ratings), "average_rating": RatingService.average(ratings)}
    )


@router.post("", response_model=BaseResponseModel[RatingResponse], status_code=status.HTTP_201_CREATED)
async def create_rating(
    rating_in: RatingCreate,
    current_user: User = Depends(get_current_active_user),
    db: Database = Depends(get_db)
) -> Any:
    rating = await RatingService.create_rating(db, current_user, rating_in)
    return BaseResponseModel(code=status.HTTP_201_CREATED, message="Rating submitted successfully", data=rating)
