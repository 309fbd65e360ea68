import logging
from typing import List, Optional

from skillswap.core.exceptions import AuthorizationDenied, NotFound, ValidationFailed
from skillswap.db.store import Database
from skillswap.models.message import AdminMessage, Message
from skillswap.models.user import User
from skillswap.schemas.message import AdminMessageCreate, AdminMessageUpdate, MessageCreate

logger = logging.getLogger(__name__)


class MessageService:
    """Direct messages between users."""

    @staticmethod
    async def list_messages(db: Database, user: User, conversation_with: Optional[int] = None) -> List[Message]:
        if conversation_with is not None:
            messages = db.messages.find_conversation(user.id, conversation_with)
        else:
            messages = db.messages.find_for_user(user.id)
        return sorted(messages, key=lambda message: (message.created_at, message.id))

    @staticmethod
    async def send_message(db: Database, user: User, message_in: MessageCreate) -> Message:
        content = (message_in.content or "").strip()
        if not message_in.receiver_id or not content:
            raise ValidationFailed("Receiver ID and message content are required")
        if message_in.receiver_id == user.id:
            raise ValidationFailed("Cannot send a message to yourself")
        if not db.users.find_by_id(message_in.receiver_id):
            raise NotFound("Receiver not found")

        message = db.messages.create(
            sender_id=user.id,
            receiver_id=message_in.receiver_id,
            content=content,
            is_read=False,
        )
        logger.info(f"User {user.id} sent message {message.id} to user {message.receiver_id}")
        return message

    @staticmethod
    async def mark_read(db: Database, user: User, message_id: int) -> Message:
        message = db.messages.find_by_id(message_id)
        if not message:
            raise NotFound("Message not found")
        if message.receiver_id != user.id:
            raise AuthorizationDenied("Only the receiver can mark a message as read")
        return db.messages.update(message_id, is_read=True)


class AdminMessageService:
    """Platform-wide broadcasts."""

    @staticmethod
    async def list_active(db: Database) -> List[AdminMessage]:
        return db.admin_messages.find_all()

    @staticmethod
    async def list_all(db: Database) -> List[AdminMessage]:
        return db.admin_messages.all()

    @staticmethod
    async def create_message(db: Database, admin: User, message_in: AdminMessageCreate) -> AdminMessage:
        title = message_in.title.strip()
        content = message_in.content.strip()
        if not title or not content:
            raise ValidationFailed("Title and content are required")

        message = db.admin_messages.create(
            admin_id=admin.id,
            title=title,
            content=content,
            type=message_in.type,
            is_active=True,
        )
        logger.info(f"Admin {admin.id} published {message.type} message {message.id}")
        return message

    @staticmethod
    async def update_message(
        db: Database, admin: User, message_id: int, message_in: AdminMessageUpdate
    ) -> AdminMessage:
        update_data = {
            field: value for field, value in message_in.model_dump(exclude_unset=True).items() if value is not None
        }
        for field in ("title", "content"):
            if field in update_data:
                update_data[field] = update_data[field].strip()
                if not update_data[field]:
                    raise ValidationFailed("Title and content are required")

        message = db.admin_messages.update(message_id, **update_data)
        if not message:
            raise NotFound("Message not found")
        logger.info(f"Admin {admin.id} updated message {message_id}")
        return message

    @staticmethod
    async def delete_message(db: Database, admin: User, message_id: int) -> AdminMessage:
        message = db.admin_messages.delete(message_id)
        if not message:
            raise NotFound("Message not found")
        logger.info(f"Admin {admin.id} deleted message {message_id}")
        return message
