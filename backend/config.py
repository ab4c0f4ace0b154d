# backend/config.py
import logging
import sys
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    # Database connection, defaults match a local development MySQL
    DB_HOST: str = "localhost"
    DB_USER: str = "app_user"
    DB_PASSWORD: str = "app_password"
    DB_NAME: str = "maintenance_db"
    DB_PORT: int = 3306

    # Pool bounds; no timeout means callers queue until a connection frees up
    DB_POOL_SIZE: int = 10
    DB_POOL_TIMEOUT: Optional[float] = None

    # Full URL override (e.g. sqlite:///./maintenance.db)
    DATABASE_URL: Optional[str] = None

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    STATIC_DIR: str = str(Path(__file__).parent / "public")
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=str(env_path), extra="ignore")

settings = Settings()

# Configure logging to stdout; modules log through logging.getLogger(__name__)
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
