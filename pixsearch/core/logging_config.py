"""
Logging setup shared by the API server and the CLI
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from pixsearch.core.config import settings


def setup_logging(log_file: Optional[str] = None, level: Optional[str] = None) -> None:
    """Configure the root logger: console always, rotating file when log_file is set."""
    log_file = settings.log_file if log_file is None else log_file
    level_name = (level or settings.log_level).upper()

    handlers: list = [logging.StreamHandler()]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_file, maxBytes=5 * 1024 * 1024, backupCount=2, encoding="utf-8"
            )
        )

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=settings.log_format,
        datefmt=settings.log_date_format,
        handlers=handlers,
        force=True,
    )

    # Quiet noisy libraries
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
