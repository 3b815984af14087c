"""Runtime configuration and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

OUTPUT_FORMATS = ("text", "json")


@dataclass
class Settings:
    """DeliveryGuard runtime settings.

    Attributes:
        log_level: Standard logging level name (DEBUG, INFO, WARNING, ...)
        output_format: Default CLI report format, "text" or "json"
    """

    log_level: str = "WARNING"
    output_format: str = "text"

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        self.output_format = self.output_format.lower()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format: {self.output_format}. "
                f"Expected one of: {', '.join(OUTPUT_FORMATS)}"
            )

    @classmethod
    def from_env(cls) -> Settings:
        """Create settings from environment variables.

        Reads:
        1. DELIVERYGUARD_LOG_LEVEL (default: WARNING)
        2. DELIVERYGUARD_OUTPUT_FORMAT (default: text)
        """
        return cls(
            log_level=os.environ.get("DELIVERYGUARD_LOG_LEVEL", "WARNING"),
            output_format=os.environ.get("DELIVERYGUARD_OUTPUT_FORMAT", "text"),
        )


def configure_logging(settings: Settings) -> None:
    """Apply the configured level to the root logger."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(settings.log_level)
