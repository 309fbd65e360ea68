from datetime import datetime
from pydantic import BaseModel

# Claims of a decoded access token
class TokenPayload(BaseModel):
    sub: int  # user id
    exp: datetime
    iat: datetime
    type: str
    jti: str
    roles: list[str]
