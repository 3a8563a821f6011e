"""Services package - catalog and queue access"""

from services.catalog_service import CatalogService
from services.queue_service import QueueService

__all__ = [
    "CatalogService",
    "QueueService",
]
