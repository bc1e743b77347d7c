from pathlib import Path
from typing import Literal, Optional, List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    # ---- app/runtime ----
    env: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ---- storage ----
    data_file: Path = Path("missions-data.json")
    static_dir: Optional[Path] = None  # serve the browser client from here when set

    # ---- API server configuration ----
    api_host: str = "127.0.0.1"  # localhost for dev, 0.0.0.0 for docker/prod
    api_port: int = 3001
    api_reload: bool = False
    api_workers: int = 1  # keep at 1: writes are serialized per process
    cors_origins: List[str] = ["*"]

    # ---- client ----
    api_base_url: str = "http://localhost:3001"
    request_timeout: float = 10.0

    model_config = SettingsConfigDict(
        env_file = ".env",
        env_prefix="TURNO_",      # TURNO_DATA_FILE, TURNO_LOG_LEVEL, etc.
        extra = "ignore"
    )


def get_settings() -> Settings:
    """Build settings from the current environment (and .env file)."""
    return Settings()
