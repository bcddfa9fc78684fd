# Standard library imports
import logging
from typing import Optional

# Local application imports
from .config import get_settings


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for the application.

    Args:
        level: Log level name; defaults to the LOG_LEVEL setting
    """
    log_level = (level or get_settings().log_level).upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO), format=LOG_FORMAT)
    logging.getLogger("storefront").setLevel(getattr(logging, log_level, logging.INFO))
