"""
Configuration loaded from environment variables
Only the HTTP service reads these; the resolver itself is not configurable
"""

from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path


# Find .env file - could be in current dir, project root, or set via env
def _find_env_file() -> str:
    """Find .env file in current or project root directory"""
    if Path(".env").exists():
        return ".env"
    # Project root (when running from backend/)
    root_env = Path(__file__).parent.parent.parent / ".env"
    if root_env.exists():
        return str(root_env)
    return ".env"


class Settings(BaseSettings):
    """Application settings from environment"""

    LOG_LEVEL: str = "INFO"

    # Report which header (or "peer") supplied the address in /whoami
    EXPOSE_RESOLUTION_SOURCE: bool = True

    # Serve /docs and /openapi.json
    ENABLE_DOCS: bool = False

    class Config:
        env_file = _find_env_file()
        case_sensitive = True


ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_settings(active_settings: Settings) -> None:
    """Validate settings before the service starts."""
    errors = []

    level = active_settings.LOG_LEVEL
    if not isinstance(level, str) or level.upper() not in ALLOWED_LOG_LEVELS:
        allowed = ", ".join(ALLOWED_LOG_LEVELS)
        errors.append(f"LOG_LEVEL must be one of: {allowed}")

    if errors:
        raise ValueError("Invalid configuration:\n- " + "\n- ".join(errors))


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()


settings = get_settings()
