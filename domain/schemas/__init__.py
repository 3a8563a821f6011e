"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.catalog_schemas import ExampleInfo, ExampleRunResponse
from domain.schemas.command_schemas import CommandRecordResponse

__all__ = [
    "ExampleInfo",
    "ExampleRunResponse",
    "CommandRecordResponse",
]
