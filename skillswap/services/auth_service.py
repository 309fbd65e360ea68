import logging
from datetime import datetime, timezone
from typing import Tuple

from skillswap.core.exceptions import AuthenticationRequired, AuthorizationDenied, ValidationFailed
from skillswap.core.security import create_access_token, get_password_hash, verify_password, verify_token
from skillswap.db.store import Database
from skillswap.models.user import User
from skillswap.schemas.token import TokenPayload
from skillswap.schemas.user import UserCreate

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials or user is banned"

# checked instead of a real hash when the email is unknown
DUMMY_PASSWORD_HASH = get_password_hash("skillswap-unknown-user")


class AuthService:
    @staticmethod
    async def register(db: Database, user_in: UserCreate) -> Tuple[User, str]:
        """Create an account and return it with a fresh access token."""
        email = user_in.email.strip().lower()
        if db.users.find_by_email(email):
            logger.warning("Registration rejected: email already registered")
            raise ValidationFailed("User already exists")

        user = db.users.create(
            email=email,
            name=user_in.name,
            location=user_in.location,
            hashed_password=get_password_hash(user_in.password),
            is_public=True,
            availability=[],
            role="user",
            is_banned=False,
        )
        logger.info(f"Registered user {user.id}")
        return user, AuthService.issue_token(user)

    @staticmethod
    async def login(db: Database, email: str, password: str) -> Tuple[User, str]:
        """Check credentials and return the user with a fresh access token."""
        user = db.users.find_by_email(email)
        password_ok = verify_password(password, user.hashed_password if user else DUMMY_PASSWORD_HASH)
        if not user or user.is_banned or not password_ok:
            logger.warning("Login rejected")
            raise AuthenticationRequired(INVALID_CREDENTIALS)

        logger.info(f"User {user.id} logged in")
        return user, AuthService.issue_token(user)

    @staticmethod
    def issue_token(user: User) -> str:
        return create_access_token(user.id, [user.role])

    @staticmethod
    async def resolve_token(db: Database, token: str) -> Tuple[User, TokenPayload]:
        """Map a bearer token to the user it was issued for."""
        if not token:
            raise AuthenticationRequired("Authentication required")
        try:
            payload = verify_token(token)
        except ValueError as e:
            raise AuthenticationRequired(str(e))

        if db.revoked_tokens.is_revoked(payload.jti):
            raise AuthenticationRequired("Token has been revoked")

        user = db.users.find_by_id(payload.sub)
        if not user:
            raise AuthenticationRequired("Could not validate credentials: user no longer exists")
        return user, payload

    @staticmethod
    async def logout(db: Database, payload: TokenPayload, reason: str = "Logout") -> None:
        if db.revoked_tokens.is_revoked(payload.jti):
            return
        AuthService.purge_expired_revocations(db)
        db.revoked_tokens.create(
            jti=payload.jti,
            user_id=payload.sub,
            expires_at=payload.exp,
            reason=reason,
        )
        logger.info(f"User {payload.sub} logged out")

    @staticmethod
    def require_active(user: User) -> User:
        if user.is_banned:
            raise AuthorizationDenied("Account is banned")
        return user

    @staticmethod
    def require_admin(user: User) -> User:
        if not user.is_admin:
            raise AuthorizationDenied("Admin access required")
        return user

    @staticmethod
    def purge_expired_revocations(db: Database) -> int:
        """Drop revocation records whose tokens would have expired anyway."""
        now = datetime.now(timezone.utc)
        return db.revoked_tokens.delete_where(lambda token: token.expires_at < now)
