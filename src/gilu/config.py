# src/gilu/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required: every value has a default that works from a fresh checkout.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "GILU"

DEFAULT_STORAGE_PATH = Path("./data/gilu.txt")
UI_STYLES = ("console", "plain")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = _env(name, default).lower()
    return raw if raw in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path

    # ---- Storage ----
    storage_path: Path

    # ---- Presentation ----
    ui_style: str

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "Gilu"),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").upper(),
            log_dir=_env_path(_k("LOG_DIR"), Path(".local/gilu")),
            storage_path=_env_path(_k("STORAGE_PATH"), DEFAULT_STORAGE_PATH),
            ui_style=_env_choice(_k("UI_STYLE"), UI_STYLES, "console"),
        )

    def with_storage_path(self, path: str | Path | None) -> "Settings":
        """Copy with the storage path overridden (CLI argument)."""
        if path is None or str(path).strip() == "":
            return self
        return replace(self, storage_path=Path(path).expanduser())


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load .env (without overriding real env vars) once and build Settings."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
