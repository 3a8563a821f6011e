"""
Persistent command queue.

Commands are pydantic models, so a command can be written to the ``commands``
table as a JSON envelope and rebuilt later by whoever works the queue. Each row
is either pending or completed; the worker picks the oldest pending row of its
queue, executes it, and the command marks its own row completed.

There is no locking, no retry and no recovery: a command that raises leaves its
row pending and the exception reaches the caller of ``work()``.
"""

import inspect
import logging
import threading
from abc import abstractmethod
from typing import Any, ClassVar, Dict, Optional, Type

from pydantic import BaseModel, Field, ValidationError
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from app.exceptions import NotFoundError, ServiceValidationError
from domain.enums import CommandStatus
from domain.models import database
from repositories.command_repository import CommandRepository

logger = logging.getLogger("patterns.queue")

# Command class name -> class, filled in as subclasses are defined
COMMAND_TYPES: Dict[str, Type["QueuedCommand"]] = {}


class CommandEnvelope(BaseModel):
    """What is stored in the ``command`` column"""

    type: str
    data: Dict[str, Any]


class QueuedCommand(BaseModel):
    """
    Base class for commands that can sit in a CommandQueue.

    ``id`` is the queue row the command was loaded from and is never
    serialized; ``status`` travels with the command.
    """

    id: Optional[int] = Field(default=None, exclude=True)
    status: CommandStatus = CommandStatus.PENDING

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs):
        super().__pydantic_init_subclass__(**kwargs)
        # Intermediate bases such as DocumentCommand cannot be rebuilt
        if not inspect.isabstract(cls):
            COMMAND_TYPES[cls.__name__] = cls

    @abstractmethod
    def execute(self, queue: "CommandQueue") -> None:
        """Run the command; implementations finish by calling complete()"""

    def complete(self, queue: "CommandQueue") -> None:
        self.status = CommandStatus.COMPLETED
        queue.complete_command(self)

    def serialize(self) -> str:
        envelope = CommandEnvelope(
            type=type(self).__name__, data=self.model_dump(mode="json")
        )
        return envelope.model_dump_json()

    @staticmethod
    def deserialize(payload: str) -> "QueuedCommand":
        """Rebuild a command from its stored envelope"""
        try:
            envelope = CommandEnvelope.model_validate_json(payload)
        except ValidationError as e:
            raise ServiceValidationError(
                "Stored command is not a valid envelope", code="INVALID_COMMAND"
            ) from e

        command_cls = COMMAND_TYPES.get(envelope.type)
        if command_cls is None:
            raise ServiceValidationError(
                f"Unknown command type '{envelope.type}'",
                details={"known_types": sorted(COMMAND_TYPES)},
                code="UNKNOWN_COMMAND",
            )
        try:
            return command_cls.model_validate(envelope.data)
        except ValidationError as e:
            raise ServiceValidationError(
                f"Invalid data for command type '{envelope.type}'",
                details={"errors": e.errors(include_url=False, include_context=False)},
                code="INVALID_COMMAND",
            ) from e


class CommandQueue:
    """A named queue of serialized commands stored in the ``commands`` table"""

    _instances: ClassVar[Dict[str, "CommandQueue"]] = {}
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, name: str = "default", engine: Optional[Engine] = None):
        self.name = name
        self.engine = engine or database.engine
        database.init_database(self.engine)
        self._sessions = sessionmaker(bind=self.engine, future=True)

    @classmethod
    def get(cls, name: str = "default") -> "CommandQueue":
        """Process-wide queue for ``name`` on the configured database"""
        with cls._lock:
            if name not in cls._instances:
                cls._instances[name] = cls(name)
            return cls._instances[name]

    @classmethod
    def reset_instances(cls) -> None:
        with cls._lock:
            cls._instances.clear()

    def is_empty(self) -> bool:
        with self._sessions() as db:
            return CommandRepository(db).count_pending(self.name) == 0

    def add(self, command: QueuedCommand) -> int:
        """Store the command as a pending row and return the row id"""
        with self._sessions() as db:
            record = CommandRepository(db).enqueue(self.name, command.serialize())
            logger.debug(
                "Queued %s as #%d on '%s'", type(command).__name__, record.id, self.name
            )
            return record.id

    def get_command(self) -> Optional[QueuedCommand]:
        """Oldest pending command of this queue, or None when there is none"""
        with self._sessions() as db:
            record = CommandRepository(db).get_next_pending(self.name)
            if record is None:
                return None
            command = QueuedCommand.deserialize(record.command)
            command.id = record.id
            return command

    def complete_command(self, command: QueuedCommand) -> None:
        """Persist the command's status on its row"""
        if command.id is None:
            raise ServiceValidationError(
                f"{type(command).__name__} was not loaded from a queue",
                code="COMMAND_NOT_QUEUED",
            )
        with self._sessions() as db:
            record = CommandRepository(db).update_status(command.id, command.status)
        if record is None:
            raise NotFoundError(
                f"Command #{command.id} is not in queue '{self.name}'",
                code="COMMAND_NOT_FOUND",
            )

    def work(self) -> int:
        """Execute pending commands until none are left; returns how many ran"""
        processed = 0
        while not self.is_empty():
            command = self.get_command()
            if command is None:
                break
            logger.info(
                "Executing %s #%d from '%s'", type(command).__name__, command.id, self.name
            )
            command.execute(self)
            if self._is_pending(command.id):
                raise ServiceValidationError(
                    f"{type(command).__name__} #{command.id} finished without completing",
                    code="COMMAND_NOT_COMPLETED",
                )
            processed += 1
        logger.info("Queue '%s' drained after %d command(s)", self.name, processed)
        return processed

    def _is_pending(self, command_id: int) -> bool:
        with self._sessions() as db:
            record = CommandRepository(db).get_by_id(command_id)
            return record is not None and record.status == CommandStatus.PENDING.value
