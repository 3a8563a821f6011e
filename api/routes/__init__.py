"""API routes package"""

from . import health, examples, queues

__all__ = ["health", "examples", "queues"]
