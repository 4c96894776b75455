"""
Generic entity store over a SQLAlchemy session.

An ``EntityStore`` wraps one mapped model class and exposes the small set
of operations the services need: list, lookup by primary key, lookup by
owning client, insert, partial update and delete.  The session is always
passed in by the caller; the store never opens connections on its own.

Every write commits immediately.  Multi-step operations built on top of
the store (such as deleting a client together with its dependents) are
therefore not atomic as a whole.
"""

from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from solobiz.db.base import Base


ModelT = TypeVar("ModelT", bound=Base)


class EntityStore(Generic[ModelT]):

    def __init__(self, db: Session, model: Type[ModelT]):
        self.db = db
        self.model = model

    def list(self, *order_by: Any) -> List[ModelT]:
        query = self.db.query(self.model)
        if order_by:
            query = query.order_by(*order_by)
        return query.all()

    def get(self, entity_id: int) -> Optional[ModelT]:
        return self.db.get(self.model, entity_id)

    def list_by_client(self, client_id: int, *order_by: Any, **filters: Any) -> List[ModelT]:
        query = self.db.query(self.model).filter(self.model.client_id == client_id)
        if filters:
            query = query.filter_by(**filters)
        if order_by:
            query = query.order_by(*order_by)
        return query.all()

    def insert(self, entity: ModelT) -> int:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity.id

    def update(self, entity_id: int, **fields: Any) -> bool:
        entity = self.get(entity_id)
        if entity is None:
            return False

        for name, value in fields.items():
            setattr(entity, name, value)

        self.db.commit()
        return True

    def delete(self, entity_id: int) -> bool:
        entity = self.get(entity_id)
        if entity is None:
            return False

        self.db.delete(entity)
        self.db.commit()
        return True

    def delete_by_client(self, client_id: int) -> int:
        removed = (
            self.db.query(self.model)
            .filter(self.model.client_id == client_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return removed
