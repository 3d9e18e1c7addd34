from __future__ import annotations

"""
Logging Settings.

Resolves the fsgraph configuration keys `log_level` and `log_file` into the
immutable settings consumed by `configure_logging`.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Attributes:
        level: Minimum severity name; unknown names resolve to INFO.
        console: Write records to stderr.
        log_file: Optional rotating diagnostics file.
        max_bytes: Rollover threshold of the diagnostics file.
        backup_count: Rotated segments kept next to it.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    @classmethod
    def from_settings(cls, conf: Dict[str, Any]) -> "LoggingConfig":
        """Build from a validated fsgraph configuration (console always on)."""
        return cls(level=conf["log_level"], console=True, log_file=conf["log_file"] or None)
