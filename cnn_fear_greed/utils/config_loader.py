# cnn_fear_greed/utils/config_loader.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo

import yaml

from cnn_fear_greed.use_cases.parse_fear_greed_use_case import CNN_FEAR_GREED_URL

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config") / "fear_greed.yaml"


@dataclass(frozen=True)
class FearGreedSettings:
    url: str = CNN_FEAR_GREED_URL
    timeout_seconds: Optional[float] = 30
    user_agent: Optional[str] = None
    timezone: str = "America/New_York"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.url, str) or not self.url.startswith(("http://", "https://")):
            raise ValueError("url must start with http:// or https://")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


def load_settings(path: str | Path | None = None) -> FearGreedSettings:
    """
    Load settings from YAML.

    Resolution order: explicit path > $FEAR_GREED_CONFIG > config/fear_greed.yaml.
    A missing file yields the built-in defaults.
    """
    env_path = os.getenv("FEAR_GREED_CONFIG")
    config_path = Path(path or env_path or DEFAULT_CONFIG_PATH)

    if not config_path.exists():
        logger.info("Config file not found, using defaults | path=%s", config_path)
        return FearGreedSettings()

    with open(config_path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    source = raw.get("source") or {}
    defaults = FearGreedSettings()

    settings = FearGreedSettings(
        url=source.get("url", defaults.url),
        timeout_seconds=source.get("timeout_seconds", defaults.timeout_seconds),
        user_agent=source.get("user_agent", defaults.user_agent),
        timezone=raw.get("timezone", defaults.timezone),
        log_file=(raw.get("logging") or {}).get("file", defaults.log_file),
    )
    logger.info("Resolved settings | path=%s", config_path)
    return settings
