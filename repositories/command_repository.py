"""
Repository for command queue rows.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from domain.enums import CommandStatus
from domain.models.command import CommandRecord
from repositories.base import BaseRepository


class CommandRepository(BaseRepository[CommandRecord]):
    """Repository for serialized commands, scoped by queue name"""

    def __init__(self, db: Session):
        super().__init__(db, CommandRecord)

    def count_pending(self, queue: str) -> int:
        """Number of rows in the queue still waiting to run"""
        return (
            self.db.query(CommandRecord)
            .filter(
                CommandRecord.queue == queue,
                CommandRecord.status == CommandStatus.PENDING.value,
            )
            .count()
        )

    def enqueue(self, queue: str, payload: str) -> CommandRecord:
        """Store a serialized command as a pending row"""
        record = CommandRecord(
            queue=queue, command=payload, status=CommandStatus.PENDING.value
        )
        return self.create(record)

    def get_next_pending(self, queue: str) -> Optional[CommandRecord]:
        """Oldest pending row of the queue, by insertion id"""
        return (
            self.db.query(CommandRecord)
            .filter(
                CommandRecord.queue == queue,
                CommandRecord.status == CommandStatus.PENDING.value,
            )
            .order_by(CommandRecord.id.asc())
            .first()
        )

    def update_status(
        self, command_id: int, status: CommandStatus
    ) -> Optional[CommandRecord]:
        """Set the status of a row; returns None when the row is gone"""
        record = self.get_by_id(command_id)
        if not record:
            return None
        record.status = CommandStatus(status).value
        return self.update(record)

    def get_by_queue(
        self,
        queue: str,
        status: Optional[CommandStatus] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[CommandRecord]:
        """Rows of one queue in insertion order, optionally filtered by status"""
        query = self.db.query(CommandRecord).filter(CommandRecord.queue == queue)
        if status is not None:
            query = query.filter(CommandRecord.status == CommandStatus(status).value)
        return query.order_by(CommandRecord.id.asc()).offset(skip).limit(limit).all()
