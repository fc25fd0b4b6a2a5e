"""
Runtime settings for the fab command line tools.

The library itself never configures logging; entry points call
``setup_logging`` with settings read from the environment.
"""

import logging
import os

from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class FabSettings(BaseModel):
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_upper(cls, v: str) -> str:
        return v.strip().upper()

    @classmethod
    def from_env(cls) -> "FabSettings":
        """Read settings from FAB_LOG_LEVEL and FAB_LOG_FORMAT"""
        return cls(
            log_level=os.environ.get("FAB_LOG_LEVEL", "INFO"),
            log_format=os.environ.get("FAB_LOG_FORMAT", DEFAULT_LOG_FORMAT),
        )


def setup_logging(settings: FabSettings) -> int:
    """Configure root logging, returning the numeric level applied"""
    numeric_level = getattr(logging, settings.log_level, None)
    if not isinstance(numeric_level, int):
        print(f"Invalid log level: {settings.log_level}, defaulting to INFO")
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format=settings.log_format,
        force=True,
    )

    logger.info(
        "Logging configured",
        extra={"log_level": settings.log_level, "numeric_level": numeric_level},
    )
    return numeric_level
