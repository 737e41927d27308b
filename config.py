"""Runtime settings for the color extraction server."""

import logging
import os
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field

ENV_PREFIX = "COLOR_EXTRACT_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=8973, ge=1, le=65535)
    log_level: LogLevel = "INFO"
    # Named colors match ordinary words ("tan", "snow"), so they are opt-in
    named_colors: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from COLOR_EXTRACT_* environment variables."""
        values = {}
        for name in cls.model_fields:
            raw = os.getenv(ENV_PREFIX + name.upper())
            if raw is not None:
                values[name] = raw.upper() if name == "log_level" else raw
        return cls(**values)


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once for the process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
