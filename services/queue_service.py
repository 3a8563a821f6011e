import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from domain.enums import CommandStatus
from domain.models import CommandRecord
from repositories import CommandRepository

logger = logging.getLogger("patterns.queue")


class QueueService:
    """Read access to the stored rows of the command queues"""

    @staticmethod
    def list_commands(
        db: Session,
        queue: str,
        status: Optional[CommandStatus] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[CommandRecord]:
        repo = CommandRepository(db)
        records = repo.get_by_queue(queue, status=status, skip=skip, limit=limit)
        logger.info(f"queue_listed queue={queue} status={status} count={len(records)}")
        return records
