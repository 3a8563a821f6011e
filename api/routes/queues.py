"""Command queue inspection routes"""

from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from api.dependencies import get_db
from domain.enums import CommandStatus
from domain.schemas import CommandRecordResponse
from services import QueueService

router = APIRouter(prefix="/queues", tags=["Queues"])
logger = logging.getLogger("patterns.api.queues")


@router.get("/{name}/commands", response_model=List[CommandRecordResponse])
def list_commands(
    name: str,
    status: Optional[int] = Query(None, ge=0, le=1, description="0 = pending, 1 = completed"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: Session = Depends(get_db),
):
    """Stored command rows of one queue, oldest first"""
    status_filter = CommandStatus(status) if status is not None else None
    return QueueService.list_commands(db, name, status=status_filter, skip=skip, limit=limit)
