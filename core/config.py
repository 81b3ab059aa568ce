# ==================================================================================
# core/config.py — FastAPI Configuration (Pydantic v2 Settings)
# ==================================================================================
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # ------------------------
    # DATABASE CONFIG
    # ------------------------
    # Falls back to a local SQLite file when unset (see core/database.py)
    DATABASE_URL: Optional[str] = None
    DATABASE_ECHO: bool = False

    # ------------------------
    # FRONTEND CONFIG
    # ------------------------
    FRONTEND_URL: str = "http://localhost:5173"
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # ------------------------
    # ENVIRONMENT SETTINGS
    # ------------------------
    ENVIRONMENT: str = "development"  # 'development' | 'production'
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    @property
    def CORS_ORIGINS(self) -> List[str]:
        """Allowed origins always include the configured frontend."""
        origins = list(self.ALLOWED_ORIGINS)
        if self.FRONTEND_URL not in origins:
            origins.append(self.FRONTEND_URL)
        return origins

    # ------------------------
    # Pydantic v2 Settings
    # ------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# ------------------------
# Global Settings Loader
# ------------------------
# Export .env into os.environ before settings are read
load_dotenv()

try:
    settings = Settings()
except ValidationError as e:
    logger.error("❌ Environment configuration error — missing or invalid settings!\n%s", e)
    sys.exit(1)
