from datetime import datetime
from typing import Dict, FrozenSet, List, Literal, Optional
from pydantic import BaseModel

SwapStatus = Literal["pending", "accepted", "rejected", "completed", "cancelled", "flagged"]

# Status changes a participant may make. Admin review has its own rules in SwapRequestService.
TRANSITIONS: Dict[str, FrozenSet[str]] = {
    "pending": frozenset({"accepted", "rejected", "cancelled"}),
    "accepted": frozenset({"completed", "cancelled"}),
    "rejected": frozenset({"cancelled"}),
    "flagged": frozenset({"cancelled"}),
    "completed": frozenset(),
    "cancelled": frozenset(),
}

def can_transition(current: str, target: str) -> bool:
    return target in TRANSITIONS.get(current, frozenset())

class SwapRequest(BaseModel):
    id: int
    requester_id: int
    receiver_id: int
    offered_skill_id: int
    wanted_skill_id: int
    offered_skill_ids: List[int] = []
    wanted_skill_ids: List[int] = []
    status: SwapStatus = "pending"
    message: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    def involves(self, user_id: int) -> bool:
        return user_id in (self.requester_id, self.receiver_id)

    def counterpart_of(self, user_id: int) -> int:
        return self.receiver_id if user_id == self.requester_id else self.requester_id
