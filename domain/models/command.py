"""
Persisted command queue rows.
"""

from sqlalchemy import Column, Integer, Text, TIMESTAMP, Index
from sqlalchemy.sql import func

from domain.enums import CommandStatus
from domain.models.database import Base


class CommandRecord(Base):
    """One serialized command waiting in (or done with) a named queue"""

    __tablename__ = "commands"

    id = Column(Integer, primary_key=True, autoincrement=True)
    queue = Column(Text, nullable=False, default="default")
    command = Column(Text, nullable=False)
    status = Column(Integer, nullable=False, default=CommandStatus.PENDING.value)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (Index("ix_commands_queue_status", "queue", "status"),)
