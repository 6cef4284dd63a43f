from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from gcal import CONFIG_DIR, CONFIG_PATH
from gcal.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# GcalConfig (~/.config/gcal/gcal.yaml)
# =============================================================================

class CalendarSettings(BaseModel):
    model_config = ConfigDict(extra="allow")
    id: str = Field(default="primary")
    max_results: int = Field(default=250, ge=1, le=2500)


class AuthSettings(BaseModel):
    model_config = ConfigDict(extra="allow")
    directory: str = Field(default=str(CONFIG_DIR))
    credentials_file: str = Field(default="credentials.json")
    token_file: str = Field(default="token.json")

    @property
    def credentials_path(self) -> Path:
        return Path(self.directory).expanduser() / self.credentials_file

    @property
    def token_path(self) -> Path:
        return Path(self.directory).expanduser() / self.token_file


class DisplaySettings(BaseModel):
    model_config = ConfigDict(extra="allow")
    participants_width: int = Field(default=25, ge=8)
    summary_width: int = Field(default=45, ge=4)
    organizer_width: int = Field(default=12, ge=1)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="allow")
    level: Optional[str] = None
    format: Optional[Literal["console", "json"]] = None


class GcalConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    calendar: CalendarSettings = Field(default_factory=CalendarSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def config_path(explicit: str | None = None) -> Path:
    """Pick the settings file: explicit flag, then GCAL_CONFIG, then the default."""
    if explicit:
        return Path(explicit).expanduser()
    env_path = os.environ.get("GCAL_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return CONFIG_PATH


def load_config(path: str | Path | None = None) -> GcalConfig:
    yaml_path = config_path(str(path) if path is not None else None)

    try:
        if yaml_path.exists():
            with open(yaml_path) as f:
                raw = yaml.safe_load(f) or {}
        else:
            raw = {}

        return GcalConfig.model_validate(raw)
    except Exception as e:
        logger.warning("config_invalid", path=str(yaml_path), error=str(e), using="defaults")
        return GcalConfig()


__all__ = [
    "AuthSettings",
    "CalendarSettings",
    "DisplaySettings",
    "GcalConfig",
    "LoggingSettings",
    "config_path",
    "load_config",
]
