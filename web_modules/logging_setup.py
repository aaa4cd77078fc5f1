import logging
from datetime import datetime
from pathlib import Path

from web_modules.config import web_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging() -> None:
    """Console logging, plus a daily file when ENABLE_FILE_LOGGING is set."""
    handlers = [logging.StreamHandler()]
    if web_settings.ENABLE_FILE_LOGGING:
        log_dir = Path(web_settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"boutique_web_{datetime.now().strftime('%Y%m%d')}.log"
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, web_settings.LOG_LEVEL.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
