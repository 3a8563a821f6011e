"""
Logging setup shared by the API, the CLI and standalone example runs.
"""

import logging

from app.config import settings


def configure_logging(level: str = None) -> None:
    """Configure root logging once with the configured level and format"""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper()),
        format=settings.log_format,
    )
