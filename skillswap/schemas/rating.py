from datetime import datetime
from typing import Optional
from pydantic import BaseModel

class RatingCreate(BaseModel):
    # Presence and range are checked by RatingService so the errors read the same as the other rules
    rated_user_id: Optional[int] = None
    swap_request_id: Optional[int] = None
    rating: Optional[int] = None
    feedback: Optional[str] = None
    review: Optional[str] = None

class RatingResponse(BaseModel):
    id: int
    swap_request_id: int
    rater_id: int
    rated_user_id: int
    rating: int
    feedback: str
    review: str
    created_at: datetime
    rater_name: Optional[str] = None
    rater_photo: Optional[str] = None

    class Config:
        from_attributes = True
