"""
Payroll Core - Logging Setup

The library only creates module loggers; applications call setup_logging()
once at startup to get the standard format on the root logger.
"""

import logging
from typing import Optional

from payroll_core.config import get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging with the level from settings unless given."""
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT
    )
