from __future__ import annotations

"""
Logging Configuration Models.

Settings consumed by configure_logging and the mapping from level names to
numeric logging constants.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable logging setup.

    Attributes:
        level: Minimum severity name.
        console: Emit records on stderr.
        log_file: Optional rotating log file path.
        max_bytes: Rotation threshold per file.
        backup_count: Rotated files kept.
        console_fmt: Format for stderr records.
        file_fmt: Format for file records.
        datefmt: Timestamp format for file records.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
