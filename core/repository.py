"""Repository pattern base class for database operations.

Provides common CRUD operations so the calorie, plan and client services
do not repeat add/commit/refresh boilerplate.
"""

from datetime import datetime
from sqlalchemy.orm import Session
from typing import TypeVar, Generic, Type, Optional, List, Any, Dict
from database.models import Base
from core.exceptions import NotFoundError

T = TypeVar('T', bound=Base)


class BaseRepository(Generic[T]):
    """Generic repository for common database operations.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
    """

    def __init__(self, model: Type[T], session: Session):
        self.model = model
        self.session = session

    def create(self, obj: T) -> T:
        """Add, commit and refresh a new object."""
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def get_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an object by its primary key, or None."""
        return self.session.get(self.model, id)

    def get_or_404(self, id: Any) -> T:
        """Retrieve an object by primary key or raise `NotFoundError`.

        Args:
            id: Primary key value.

        Returns:
            The model instance.

        Raises:
            NotFoundError: If no row has that key.
        """
        obj = self.get_by_id(id)
        if obj is None:
            raise NotFoundError(self.model.__name__, id)
        return obj

    def list_by(self, order_by=None, **filters) -> List[T]:
        """Return rows matching equality filters, optionally ordered."""
        query = self.session.query(self.model).filter_by(**filters)
        if order_by is not None:
            query = query.order_by(*order_by) if isinstance(order_by, (list, tuple)) else query.order_by(order_by)
        return query.all()

    def update_fields(self, obj: T, changes: Dict[str, Any]) -> T:
        """Apply a partial update, stamp ``updated_at`` when the model has it, commit.

        Args:
            obj: Model instance to modify.
            changes: Column name to new value; ``None`` values are applied as-is.

        Returns:
            The updated object with refreshed attributes.
        """
        for field, value in changes.items():
            setattr(obj, field, value)
        if hasattr(obj, "updated_at"):
            obj.updated_at = datetime.utcnow()
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def delete(self, obj: T) -> None:
        """Delete an object and commit."""
        self.session.delete(obj)
        self.session.commit()


def save(session: Session, obj: Base) -> Base:
    """Convenience function to add, commit and refresh an object.

    Args:
        session: Database session.
        obj: Model instance to persist.

    Returns:
        The persisted object with refreshed attributes.
    """
    session.add(obj)
    session.commit()
    session.refresh(obj)
    return obj
