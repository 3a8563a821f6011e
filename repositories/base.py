"""
Generic SQLAlchemy repository shared by the queue storage.
Keeps session handling out of the example code.
"""

from typing import Generic, TypeVar, Optional, List, Type
from sqlalchemy.orm import Session
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    CRUD helpers over one mapped class with an integer primary key.

    Every write commits immediately; callers own the session lifetime.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        """
        Look a row up by primary key.

        Args:
            entity_id: Integer primary key

        Returns:
            The mapped row, or None when no row has that key
        """
        return self.db.get(self.model, entity_id)

    def get_all(self, skip: int = 0, limit: int = 100) -> List[ModelType]:
        """Rows in insertion order, paginated"""
        query = self.db.query(self.model).order_by(self.model.id)
        return query.offset(skip).limit(limit).all()

    def create(self, entity: ModelType) -> ModelType:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def update(self, entity: ModelType) -> ModelType:
        """Commit pending attribute changes and reload server-side columns"""
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity_id: int) -> bool:
        """Delete by primary key; False when the row was already gone"""
        entity = self.get_by_id(entity_id)
        if entity is None:
            return False
        self.db.delete(entity)
        self.db.commit()
        return True

    def exists(self, entity_id: int) -> bool:
        return self.get_by_id(entity_id) is not None
