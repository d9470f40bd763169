"""
Configuration Management - Centralized Settings
Consolidates all environment variable handling for the key/value service
"""

import os
from typing import Dict, Any
from functools import lru_cache
from dotenv import load_dotenv

# Load environment variables once at module level
load_dotenv()

class Settings:
    """
    Centralized configuration management for the key/value service

    Provides type-safe access to environment variables with defaults
    and validation. Eliminates scattered getenv() calls across the codebase.
    """

    # Server Configuration
    APP_NAME: str = os.getenv("APP_NAME", "kv-store-service")
    VERSION: str = "1.0.0"
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    GREETING: str = os.getenv("GREETING", "Hello world\n")

    # Key-Value Store Configuration
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    REDIS_TIMEOUT_SECONDS: float = float(os.getenv("REDIS_TIMEOUT_SECONDS", "5"))

    # Development & Debugging
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "")

    @classmethod
    def validate_required_settings(cls) -> None:
        """
        Validate configuration values
        Raises ValueError if any setting is out of range
        """
        problems = []

        if not 0 < cls.PORT < 65536:
            problems.append(f"PORT must be between 1 and 65535, got {cls.PORT}")

        if cls.REDIS_TIMEOUT_SECONDS <= 0:
            problems.append(
                f"REDIS_TIMEOUT_SECONDS must be positive, got {cls.REDIS_TIMEOUT_SECONDS}"
            )

        if problems:
            raise ValueError(
                f"❌ Invalid configuration: {'; '.join(problems)}\n"
                f"Please check your .env file or environment configuration."
            )

    @classmethod
    def get_redis_config(cls) -> Dict[str, Any]:
        """Get key/value store connection configuration"""
        return {
            "url": cls.REDIS_URL,
            "timeout": cls.REDIS_TIMEOUT_SECONDS,
        }

    @classmethod
    def get_server_config(cls) -> Dict[str, Any]:
        """Get uvicorn server configuration"""
        return {
            "host": cls.HOST,
            "port": cls.PORT,
            "reload": cls.DEBUG,
            "log_level": cls.LOG_LEVEL.lower(),
        }

@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance

    Uses lru_cache to ensure settings are loaded only once
    and reused across the application.
    """
    settings = Settings()
    settings.validate_required_settings()
    return settings

# Convenience instance for direct import
settings = get_settings()

__all__ = [
    "Settings",
    "get_settings",
    "settings",
]
