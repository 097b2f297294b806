from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Agency Dashboard API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Hosted backend (Supabase): both values are required at startup
    supabase_url: str = ""
    supabase_anon_key: str = ""

    # Initial data set loaded into the entity store; relative paths are
    # taken from the backend/ directory, not the working directory
    seed_file: str = str(_BACKEND_DIR / "data" / "seed.yaml")

    # Avatars generated for registered users and guests
    avatar_base_url: str = "https://picsum.photos/seed"

    # Rows shown per listing on the Dashboard section
    dashboard_preview_limit: int = 4

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_activity: str = "INFO"         # DashboardController intents
    log_level_backend: str = "INFO"          # Supabase client, seed loader

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def missing_backend_settings(self) -> list[str]:
        """Environment variable names of the backend settings left empty."""
        missing = []
        if not self.supabase_url.strip():
            missing.append("SUPABASE_URL")
        if not self.supabase_anon_key.strip():
            missing.append("SUPABASE_ANON_KEY")
        return missing

    @field_validator("seed_file")
    @classmethod
    def _anchor_seed_file(cls, value: str) -> str:
        path = Path(value)
        if not path.is_absolute():
            path = _BACKEND_DIR / path
        return str(path)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
