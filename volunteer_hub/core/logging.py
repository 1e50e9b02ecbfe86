import logging
import sys
from typing import Optional

from .config import settings


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure logging for the application."""

    if level is None:
        level = settings.log_level

    # Convert string level to logging level
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    logger = logging.getLogger("volunteer_hub")
    logger.setLevel(numeric_level)

    # requests logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    return logger


# Global logger instance
logger = setup_logging()
