"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and logging setup.
"""

from app.config import settings
from app.exceptions import (
    PatternsError,
    ServiceValidationError,
    NotFoundError,
)

__all__ = [
    "settings",
    "PatternsError",
    "ServiceValidationError",
    "NotFoundError",
]
