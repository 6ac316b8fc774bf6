"""
Application settings
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    APP_NAME: str = "ReceiptPoints"

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Receipt store backend: "memory" | "sql"
    RECEIPT_STORE: str = "memory"

    # Only used by the sql backend; the default is a process-local in-memory database
    DATABASE_URL: str = "sqlite://"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
