import os
import secrets
from typing import List, Optional, Union
from pydantic import field_validator
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "SkillSwap Service")
    VERSION: str = "1.0.0"
    API_V1_STR: str = os.getenv("API_V1_STR", "/api/v1")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS settings
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",  # Frontend
    ]

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # JWT settings
    JWT_SECRET_KEY: str = os.getenv("JWT_SECRET_KEY", secrets.token_urlsafe(32))
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24))

    # Bootstrap accounts
    ADMIN_EMAIL: str = os.getenv("ADMIN_EMAIL", "admin@skillswap.com")
    ADMIN_PASSWORD: Optional[str] = os.getenv("ADMIN_PASSWORD")
    ADMIN_NAME: str = os.getenv("ADMIN_NAME", "Admin User")
    SEED_DEMO_DATA: bool = False
    DEMO_USER_PASSWORD: str = os.getenv("DEMO_USER_PASSWORD", "skillswap-demo")

    # Moderation policy: when enabled new skills stay pending until an admin approves them
    SKILLS_REQUIRE_APPROVAL: bool = False

    class Config:
        case_sensitive = True
        env_file = ".env"

settings = Settings()
