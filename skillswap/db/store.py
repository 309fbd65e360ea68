"""
In-memory system of record.

Each entity lives in its own ``Collection``: an ordered list of pydantic
records plus an id counter. Every read-modify-write runs under the
collection's lock, so ids stay unique even when several threads create
records at once. Nothing survives a process restart.
"""
import itertools
import threading
from datetime import datetime, timezone
from typing import Callable, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from skillswap.models import AdminMessage, Message, Rating, RevokedToken, Skill, SwapRequest, User

RecordT = TypeVar("RecordT", bound=BaseModel)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Collection(Generic[RecordT]):
    def __init__(self, model: Type[RecordT]):
        self.model = model
        self._records: List[RecordT] = []
        self._ids = itertools.count(1)
        self._lock = threading.RLock()

    @property
    def _has_updated_at(self) -> bool:
        return "updated_at" in self.model.model_fields

    def all(self) -> List[RecordT]:
        """Every record in insertion order, ignoring any visibility policy."""
        with self._lock:
            return list(self._records)

    def find_all(self) -> List[RecordT]:
        """Records visible on the default read path. Subclasses narrow this."""
        return self.all()

    def find_by_id(self, record_id: int) -> Optional[RecordT]:
        return self.find_first(lambda record: record.id == record_id)

    def find_where(self, predicate: Callable[[RecordT], bool]) -> List[RecordT]:
        with self._lock:
            return [record for record in self._records if predicate(record)]

    def find_first(self, predicate: Callable[[RecordT], bool]) -> Optional[RecordT]:
        with self._lock:
            return next((record for record in self._records if predicate(record)), None)

    def create(self, **fields) -> RecordT:
        with self._lock:
            now = utcnow()
            fields["id"] = next(self._ids)
            fields.setdefault("created_at", now)
            if self._has_updated_at:
                fields.setdefault("updated_at", now)
            record = self.model(**fields)
            self._records.append(record)
            return record

    def update(self, record_id: int, **changes) -> Optional[RecordT]:
        """Merge ``changes`` into the record. Returns None when the id is unknown."""
        changes.pop("id", None)
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id != record_id:
                    continue
                if self._has_updated_at:
                    changes["updated_at"] = utcnow()
                updated = self.model.model_validate({**record.model_dump(), **changes})
                self._records[index] = updated
                return updated
        return None

    def delete(self, record_id: int) -> Optional[RecordT]:
        """Hard delete. Returns the removed record, or None when the id is unknown."""
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == record_id:
                    return self._records.pop(index)
        return None

    def delete_where(self, predicate: Callable[[RecordT], bool]) -> int:
        with self._lock:
            kept = [record for record in self._records if not predicate(record)]
            removed = len(self._records) - len(kept)
            self._records = kept
            return removed

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records = []
            self._ids = itertools.count(1)


class UserCollection(Collection[User]):
    def __init__(self):
        super().__init__(User)

    def find_all(self) -> List[User]:
        return self.find_where(lambda user: not user.is_banned)

    def find_by_email(self, email: str) -> Optional[User]:
        normalized = email.strip().lower()
        return self.find_first(lambda user: user.email == normalized)


class SkillCollection(Collection[Skill]):
    def __init__(self):
        super().__init__(Skill)

    def find_all(self) -> List[Skill]:
        return self.find_where(lambda skill: skill.is_approved)

    def find_by_user_id(self, user_id: int) -> List[Skill]:
        return self.find_where(lambda skill: skill.user_id == user_id)

    def find_pending(self) -> List[Skill]:
        return self.find_where(lambda skill: not skill.is_approved)


class SwapRequestCollection(Collection[SwapRequest]):
    def __init__(self):
        super().__init__(SwapRequest)

    def find_by_user_id(self, user_id: int) -> List[SwapRequest]:
        return self.find_where(lambda request: request.involves(user_id))


class RatingCollection(Collection[Rating]):
    def __init__(self):
        super().__init__(Rating)

    def find_by_user_id(self, user_id: int) -> List[Rating]:
        """Ratings received by ``user_id``."""
        return self.find_where(lambda rating: rating.rated_user_id == user_id)

    def find_by_rater_and_swap(self, rater_id: int, swap_request_id: int) -> Optional[Rating]:
        return self.find_first(
            lambda rating: rating.rater_id == rater_id and rating.swap_request_id == swap_request_id
        )


class AdminMessageCollection(Collection[AdminMessage]):
    def __init__(self):
        super().__init__(AdminMessage)

    def find_all(self) -> List[AdminMessage]:
        return self.find_where(lambda message: message.is_active)


class MessageCollection(Collection[Message]):
    def __init__(self):
        super().__init__(Message)

    def find_for_user(self, user_id: int) -> List[Message]:
        return self.find_where(lambda message: user_id in (message.sender_id, message.receiver_id))

    def find_conversation(self, user_id: int, other_user_id: int) -> List[Message]:
        pair = {user_id, other_user_id}
        return self.find_where(lambda message: {message.sender_id, message.receiver_id} == pair)


class RevokedTokenCollection(Collection[RevokedToken]):
    def __init__(self):
        super().__init__(RevokedToken)

    def is_revoked(self, jti: str) -> bool:
        return self.find_first(lambda token: token.jti == jti) is not None


class Database:
    """Groups the collections that make up one application state."""

    def __init__(self):
        self.users = UserCollection()
        self.skills = SkillCollection()
        self.swap_requests = SwapRequestCollection()
        self.ratings = RatingCollection()
        self.admin_messages = AdminMessageCollection()
        self.messages = MessageCollection()
        self.revoked_tokens = RevokedTokenCollection()

    @property
    def collections(self) -> List[Collection]:
        return [
            self.users,
            self.skills,
            self.swap_requests,
            self.ratings,
            self.admin_messages,
            self.messages,
            self.revoked_tokens,
        ]

    def reset(self) -> None:
        for collection in self.collections:
            collection.clear()
