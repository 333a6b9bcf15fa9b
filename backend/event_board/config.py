"""Application configuration via environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    # Plain "sqlite://" keeps the store in memory for the life of the process.
    DATABASE_URL: str = "sqlite://"
    CORS_ORIGINS: str = "http://localhost:3000"
    # Header the authenticating gateway fills with the verified caller identity.
    CALLER_HEADER: str = "X-Caller-Id"
    ANONYMOUS_CALLER: str = "2vxsx-fae"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
