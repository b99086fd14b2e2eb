from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    """Walk up from this file's directory until we find pyproject.toml."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    raise FileNotFoundError("Could not find project root (no pyproject.toml found)")


PROJECT_ROOT = _find_project_root()


def _load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BEACON_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    timezones_file: Path | None = None
    log_level: str = "INFO"
    log_file: Path | None = None

    def timezones_path(self) -> Path:
        return self.timezones_file or PROJECT_ROOT / "config" / "timezones.yml"


settings = Settings()


@lru_cache
def load_timezones(path: str | None = None) -> dict[str, str]:
    """IANA zone name -> region code table. Loaded once per path."""
    data = _load_yaml(path or str(settings.timezones_path()))
    return {str(zone): str(region) for zone, region in data["timezones"].items()}
