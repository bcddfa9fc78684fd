# Standard library imports
import os
from typing import Final, List, Optional


STORAGE_BACKEND_AUTO: Final[str] = "auto"
STORAGE_BACKEND_MONGODB: Final[str] = "mongodb"
STORAGE_BACKEND_MEMORY: Final[str] = "memory"


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "community_store")
        self.mongo_connect_timeout_ms: Final[int] = int(
            os.getenv("MONGO_CONNECT_TIMEOUT_MS", "2000")
        )

        # Storage backend: "auto" tries MongoDB and falls back to memory,
        # "mongodb" expects MongoDB, "memory" never contacts it
        self.storage_backend: Final[str] = os.getenv(
            "STORAGE_BACKEND", STORAGE_BACKEND_AUTO
        ).strip().lower()

        # Purchase history
        self.order_history_limit: Final[int] = int(os.getenv("ORDER_HISTORY_LIMIT", "100"))

        # HTTP server
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3000"))
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv(
                "CORS_ORIGINS",
                "http://localhost:3000,http://localhost:5173",
            ).split(",")
            if origin.strip()
        ]

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment"""
    global _settings
    _settings = None
