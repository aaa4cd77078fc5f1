"""
Logging setup for the API process.

Console logging is always on; a daily log file is added when file logging
is enabled.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    enable_file: bool = False,
    log_dir: Optional[str] = None,
    prefix: str = "boutique",
) -> None:
    """
    Configure the root logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_file: If True, also write to ``<log_dir>/<prefix>_YYYYMMDD.log``
        log_dir: Directory for log files (defaults to ./logs)
        prefix: Log file name prefix
    """
    handlers = [logging.StreamHandler()]

    if enable_file:
        directory = Path(log_dir or "logs")
        directory.mkdir(parents=True, exist_ok=True)
        log_file = directory / f"{prefix}_{datetime.now().strftime('%Y%m%d')}.log"
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
