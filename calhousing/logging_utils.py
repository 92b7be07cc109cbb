# calhousing/logging_utils.py

import logging
from typing import Optional

from .config import log_level

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for CLIs and the server.

    Unknown level names fall back to INFO.
    """
    name = (level or log_level()).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format=LOG_FORMAT,
    )
