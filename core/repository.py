# core/repository.py
"""
Generic per-table data access used by the service layer.

A ``Repository`` wraps one SQLModel table class and the request's
``Session``. It flushes so generated values and constraint errors show up
immediately, but it never commits: every service function decides where its
transaction ends.
"""
from typing import Any, Dict, Generic, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import func
from sqlmodel import Session, SQLModel, select

from core.exceptions import NotFoundError
from core.timeutils import utcnow

ModelT = TypeVar("ModelT", bound=SQLModel)


class Repository(Generic[ModelT]):
    def __init__(self, session: Session, model: Type[ModelT], resource: Optional[str] = None):
        self.session = session
        self.model = model
        self.resource = resource or model.__name__.lower()

    def insert(self, record: ModelT) -> ModelT:
        self.session.add(record)
        self.session.flush()
        self.session.refresh(record)
        return record

    def get_by_id(self, record_id: str) -> Optional[ModelT]:
        return self.session.get(self.model, record_id)

    def list_by(self, *conditions: Any, order_by: Any = None, limit: Optional[int] = None) -> List[ModelT]:
        statement = select(self.model).where(*conditions)
        if order_by is not None:
            statement = statement.order_by(*order_by) if isinstance(order_by, (list, tuple)) else statement.order_by(order_by)
        if limit is not None:
            statement = statement.limit(limit)
        return list(self.session.exec(statement).all())

    def first_by(self, *conditions: Any, order_by: Any = None) -> Optional[ModelT]:
        results = self.list_by(*conditions, order_by=order_by, limit=1)
        return results[0] if results else None

    def count_by(self, *conditions: Any) -> int:
        statement = select(func.count()).select_from(self.model).where(*conditions)
        return self.session.exec(statement).one()

    def update(self, record_id: str, fields: Dict[str, Any]) -> ModelT:
        """Write only the given fields and refresh updated_at."""
        record = self.get_by_id(record_id)
        if record is None:
            raise NotFoundError(self.resource, f"{self.resource.capitalize()} with id {record_id} not found")

        for key, value in fields.items():
            setattr(record, key, value)
        record.updated_at = utcnow()

        self.session.add(record)
        self.session.flush()
        self.session.refresh(record)
        return record

    def delete(self, record_id: str) -> bool:
        record = self.get_by_id(record_id)
        if record is None:
            return False
        self.session.delete(record)
        self.session.flush()
        return True

    def delete_by(self, *conditions: Any) -> int:
        records = self.list_by(*conditions)
        for record in records:
            self.session.delete(record)
        self.session.flush()
        return len(records)


def changed_fields(payload: BaseModel, nullable: Iterable[str] = ()) -> Dict[str, Any]:
    """
    Fields the caller explicitly sent in a partial-update payload.

    Omitted fields are left out. An explicit ``None`` is kept only for
    columns listed in ``nullable``; for required columns it means "no change".
    """
    nullable = set(nullable)
    return {
        key: value
        for key, value in payload.model_dump(exclude_unset=True).items()
        if value is not None or key in nullable
    }
