"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.command_repository import CommandRepository

__all__ = [
    "BaseRepository",
    "CommandRepository",
]
