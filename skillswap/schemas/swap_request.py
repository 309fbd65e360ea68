from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, model_validator
from skillswap.models.swap_request import SwapStatus

class SwapRequestCreate(BaseModel):
    receiver_id: int
    offered_skill_ids: List[int] = []
    wanted_skill_ids: List[int] = []
    # Single-skill fields, still sent by older clients
    offered_skill_id: Optional[int] = None
    wanted_skill_id: Optional[int] = None
    message: Optional[str] = None

    @model_validator(mode="after")
    def merge_skill_ids(self) -> "SwapRequestCreate":
        if self.offered_skill_id is not None and self.offered_skill_id not in self.offered_skill_ids:
            self.offered_skill_ids = [self.offered_skill_id, *self.offered_skill_ids]
        if self.wanted_skill_id is not None and self.wanted_skill_id not in self.wanted_skill_ids:
            self.wanted_skill_ids = [self.wanted_skill_id, *self.wanted_skill_ids]
        self.offered_skill_ids = list(dict.fromkeys(self.offered_skill_ids))
        self.wanted_skill_ids = list(dict.fromkeys(self.wanted_skill_ids))
        return self

class SwapRequestStatusUpdate(BaseModel):
    status: SwapStatus

class SwapRequestReview(BaseModel):
    action: str

class SwapRequestResponse(BaseModel):
    id: int
    requester_id: int
    receiver_id: int
    offered_skill_id: int
    wanted_skill_id: int
    offered_skill_ids: List[int]
    wanted_skill_ids: List[int]
    status: SwapStatus
    message: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
