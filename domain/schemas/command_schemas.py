from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from domain.enums import CommandStatus


class CommandRecordResponse(BaseModel):
    """Schema for a stored command queue row"""

    id: int
    queue: str
    command: str
    status: CommandStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
