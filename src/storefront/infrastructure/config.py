"""Runtime settings, read from ``STOREFRONT_*`` environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = _PROJECT_ROOT / "data"
    log_level: str = "WARNING"
    log_json: bool = False

    # Query defaults
    recent_orders_limit: int = 10
    low_stock_threshold: int = 5

    @property
    def store_path(self) -> Path:
        return self.data_dir / "store.json"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
