import logging
from typing import Optional
from config import ApplicationConfig


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging from ApplicationConfig.LOG_LEVEL"""
    logging.basicConfig(
        level=(level or ApplicationConfig.LOG_LEVEL).upper(),
        format=ApplicationConfig.LOG_FORMAT,
    )
