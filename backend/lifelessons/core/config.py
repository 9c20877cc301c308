# lifelessons/core/config.py
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Database
    MONGO_URL: str = "mongodb://localhost:27017"
    DB_NAME: str = "assignment-11"

    # Auth
    JWT_SECRET_KEY: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7
    ADMIN_EMAIL: Optional[str] = None  # signs up as admin

    # Payments
    STRIPE_SECRET_KEY: str = ""
    PAYMENT_CURRENCY: str = "usd"

    # HTTP
    CORS_ORIGINS: List[str] = ["http://localhost:5173"]
    PORT: int = 3000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None


settings = Settings()
