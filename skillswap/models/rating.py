from datetime import datetime
from pydantic import BaseModel

class Rating(BaseModel):
    id: int
    swap_request_id: int
    rater_id: int
    rated_user_id: int
    rating: int
    feedback: str = ""
    review: str = ""
    created_at: datetime
