"""Server configuration via pydantic-settings."""

import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root (where this file lives: e2e_server/config.py)
_ROOT_DIR = Path(__file__).resolve().parent.parent

# Front-end build output, produced outside this repo
_DEFAULT_STATIC_DIR = _ROOT_DIR / "resources" / "public"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="E2E_SERVER_", extra="ignore")

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Static root – everything beneath it is served verbatim
    STATIC_DIR: str = str(_DEFAULT_STATIC_DIR)

    @property
    def listen_address(self) -> str:
        return f"{self.HOST}:{self.PORT}"


def get_settings(**overrides) -> Settings:
    """Build settings, fixing a relative STATIC_DIR to be absolute."""
    s = Settings(**overrides)
    if not os.path.isabs(s.STATIC_DIR):
        s.STATIC_DIR = str(_ROOT_DIR / s.STATIC_DIR)
    return s
