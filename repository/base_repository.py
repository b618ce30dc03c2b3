"""
Base repository providing common CRUD operations.
"""

from typing import Any, Dict, Generic, Iterable, List, Optional, Type, TypeVar
from sqlalchemy.orm import Session

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common CRUD operations.
    All specific repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def create(self, fields: Dict[str, Any]) -> T:
        """
        Insert a new row built from column values.

        Args:
            fields: Column name to value mapping

        Returns:
            Persisted model instance with generated id and defaults
        """
        obj = self.model(**fields)
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def get_by_id(self, id: int, options: Iterable[Any] = ()) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value
            options: Loader options such as ``joinedload``

        Returns:
            Model instance or None if not found
        """
        return self.db.query(self.model).options(*options).filter(self.model.id == id).first()

    def find_where(self, criteria: Iterable[Any] = (), options: Iterable[Any] = ()) -> List[T]:
        """
        Retrieve every record matching all criteria.

        Args:
            criteria: SQLAlchemy boolean expressions, combined with AND
            options: Loader options such as ``joinedload``

        Returns:
            List of model instances in the store's natural order
        """
        query = self.db.query(self.model).options(*options)
        for criterion in criteria:
            query = query.filter(criterion)
        return query.all()

    def update(self, obj: T, fields: Dict[str, Any]) -> T:
        """
        Overwrite the given columns of an existing record.

        Args:
            obj: Model instance to update
            fields: Column name to value mapping; other columns are untouched

        Returns:
            Updated model instance
        """
        for key, value in fields.items():
            setattr(obj, key, value)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def delete(self, obj: T) -> None:
        """
        Delete a record from the database.

        Args:
            obj: Model instance to delete
        """
        self.db.delete(obj)
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
