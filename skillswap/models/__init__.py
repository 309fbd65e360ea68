from skillswap.models.user import User
from skillswap.models.skill import Skill
from skillswap.models.swap_request import SwapRequest
from skillswap.models.rating import Rating
from skillswap.models.message import AdminMessage, Message
from skillswap.models.token import RevokedToken

__all__ = ["User", "Skill", "SwapRequest", "Rating", "AdminMessage", "Message", "RevokedToken"]
