"""
Domain enums for the design patterns catalog.
"""

import enum


class PatternGroup(str, enum.Enum):
    """Gang-of-Four pattern families"""

    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


class CommandStatus(int, enum.Enum):
    """Lifecycle of a queued command row"""

    PENDING = 0
    COMPLETED = 1
