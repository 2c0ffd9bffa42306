"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without polluting
  the CLI.
- Lets the loader and the renderers read config consistently.

The only user-facing flag is `--category`; everything below is tuned via
`FORTUNE_COW_*` env vars or a `.env` file.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.border import BorderStyle


def get_user_config_dir() -> Path:
    """Per-user config directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "fortune-cow"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "fortune-cow"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "fortune-cow"
    return Path.home() / ".config" / "fortune-cow"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without leaking into the core.
    - A single configuration contract for the CLI and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="FORTUNE_COW_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    fortunes_path: Path | None = Field(
        default=None,
        description="Local JSON dataset replacing the bundled fortunes.json.",
    )
    character: str = Field(
        default="cow",
        min_length=1,
        description="cowsay character that speaks the fortune.",
    )
    border_style: BorderStyle = Field(
        default_factory=BorderStyle.default,
        description="Frame style around the output (round/single/double/heavy/ascii).",
    )
    padding: int = Field(
        default=1,
        ge=0,
        le=10,
        description="Padding between the frame and its content.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level for stderr diagnostics.",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value!r}")
        return level
