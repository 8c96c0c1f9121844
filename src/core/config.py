"""Runtime settings, read from the environment"""

import logging
import os

from pydantic import BaseModel, field_validator

DEFAULT_VARIANT = "chess"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    default_variant: str = DEFAULT_VARIANT
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


def get_settings() -> Settings:
    """Collect settings from NOTATION_* environment variables, falling back to the defaults."""
    return Settings(
        default_variant=os.environ.get("NOTATION_DEFAULT_VARIANT", DEFAULT_VARIANT),
        log_level=os.environ.get("NOTATION_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
