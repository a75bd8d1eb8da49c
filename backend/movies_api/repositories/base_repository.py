from typing import Generic, TypeVar, Type, Optional, List, Any, Dict
from sqlalchemy.orm import Session
from movies_api.db import Base

ModelType = TypeVar("ModelType", bound=Base)

class BaseRepository(Generic[ModelType]):
    """Base repository with common CRUD operations.

    Writes are flushed, not committed; the calling service owns the transaction.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    def get(self, id: Any) -> Optional[ModelType]:
        """Get by ID"""
        return self.db.query(self.model).filter(self.model.id == id).first()

    def get_all(self) -> List[ModelType]:
        """Get all rows ordered by ID"""
        return self.db.query(self.model).order_by(self.model.id).all()

    def create(self, obj_in: Dict[str, Any]) -> ModelType:
        """Create new object and assign its ID"""
        db_obj = self.model(**obj_in)
        self.db.add(db_obj)
        self.db.flush()
        return db_obj

    def update_by_id(self, id: Any, obj_in: Dict[str, Any]) -> int:
        """Update columns of the row matching ID, return affected row count"""
        return (
            self.db.query(self.model)
            .filter(self.model.id == id)
            .update(obj_in, synchronize_session=False)
        )

    def delete_by_id(self, id: Any) -> int:
        """Delete by ID, return affected row count"""
        return (
            self.db.query(self.model)
            .filter(self.model.id == id)
            .delete(synchronize_session=False)
        )

    def filter_one_by(self, **kwargs) -> Optional[ModelType]:
        """Filter by multiple conditions and return first"""
        return self.db.query(self.model).filter_by(**kwargs).first()
