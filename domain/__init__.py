"""
Domain layer - Enums, queue models and API schemas.
"""

from domain import enums, models, schemas

__all__ = ["enums", "models", "schemas"]
