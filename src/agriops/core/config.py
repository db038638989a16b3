from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# .env file is in the project root (parent of src/)
# Only use if it exists (CI uses environment variables directly)
# Path: core/config.py -> agriops -> src -> project root -> .env
_ENV_FILE = Path(__file__).parent.parent.parent.parent / ".env"
_ENV_FILE = _ENV_FILE if _ENV_FILE.exists() else None


@lru_cache
def get_cache_dir() -> Path:
    """Get the cache directory (.cache/ in workspace root).

    Looks for project root by finding .git or .claude directory,
    then returns .cache/ within that root.
    """
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / ".git").exists() or (parent / ".claude").exists():
            cache_dir = parent / ".cache"
            cache_dir.mkdir(exist_ok=True)
            return cache_dir
    # Fallback to current working directory
    cache_dir = Path.cwd() / ".cache"
    cache_dir.mkdir(exist_ok=True)
    return cache_dir


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # AgriOps record store (the /api/paddocks action endpoint)
    agriops_api_url: str = "http://localhost:3000"
    agriops_api_key: str | None = None  # Sent as a bearer token when set
    agriops_tenant_id: str = "demo"

    request_timeout_seconds: float = 30.0

    # Planning window used when the CLI is not given --horizon
    default_horizon_days: int = 30

    # Display units for CLI output ("imperial" = lb/ac, acres; "metric" = kg/ha, ha)
    # Note: the planning engine always works in imperial units internally
    display_units: Literal["imperial", "metric"] = "imperial"


settings = Settings()
