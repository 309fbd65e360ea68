from datetime import datetime, timedelta, timezone
from typing import Any, Union
from jose import JWTError, jwt
from pydantic import ValidationError
from passlib.context import CryptContext
from skillswap.core.config import settings
from skillswap.schemas.token import TokenPayload
import uuid

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against its hash."""
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    """Generate password hash from plain password."""
    return pwd_context.hash(password)

def create_access_token(subject: Union[str, Any], roles: list[str], expires_delta: timedelta = None) -> str:
    """Create a signed access token for the given user id."""
    current_time = datetime.now(timezone.utc)
    expire = current_time + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))

    to_encode = {
        "sub": str(subject),
        "type": "access",
        "exp": expire.timestamp(),
        "iat": current_time.timestamp(),
        "jti": str(uuid.uuid4()),
        "roles": roles or []
    }
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.ALGORITHM)

def verify_token(token: str) -> TokenPayload:
    """Verify and decode an access token.

    Raises ValueError when the signature, expiry, token type or claims do not check out.
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.ALGORITHM])
        if payload.get("type") != "access":
            raise JWTError("Invalid token type")

        payload["exp"] = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
        payload["iat"] = datetime.fromtimestamp(payload["iat"], tz=timezone.utc)
        return TokenPayload(**payload)
    except (JWTError, KeyError, ValidationError) as e:
        raise ValueError(f"Could not validate credentials: {str(e)}")
