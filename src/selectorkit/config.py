from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorkitConfig:
    log_level: str = "WARNING"
    log_format: str = "%(levelname)s %(name)s: %(message)s"
    json_indent: int | None = None  # None = compact output


def configure_logging(config: SelectorkitConfig) -> None:
    """Apply the configured level and format to the ``selectorkit`` logger."""
    logging.basicConfig(format=config.log_format)
    logging.getLogger("selectorkit").setLevel(config.log_level.upper())
