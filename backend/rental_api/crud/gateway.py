# rental_api/crud/gateway.py
"""Row-level access to one table. Mutations are single conditional statements."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from rental_api.core.errors import ConflictingState


@contextmanager
def _integrity_guard(db: Session) -> Iterator[None]:
    try:
        yield
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictingState(str(e.orig)) from e


class Gateway:
    def __init__(self, model: type):
        self.model = model

    def list(self, db: Session) -> List[Any]:
        q = select(self.model).order_by(self.model.id)
        return list(db.execute(q).unique().scalars().all())

    def find(self, db: Session, entity_id: int) -> Optional[Any]:
        return db.get(self.model, entity_id, populate_existing=True)

    def exists(self, db: Session, entity_id: int) -> bool:
        q = select(self.model.id).where(self.model.id == entity_id)
        return db.execute(q).first() is not None

    def store(self, db: Session, values: Dict[str, Any]) -> Any:
        obj = self.model(**values)
        with _integrity_guard(db):
            db.add(obj)
            db.flush()
        return self.find(db, obj.id)

    def replace(self, db: Session, entity_id: int, values: Dict[str, Any]) -> int:
        """Overwrite every given column of row ``entity_id``; returns affected rows."""
        q = (
            update(self.model)
            .where(self.model.id == entity_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        with _integrity_guard(db):
            rowcount = db.execute(q).rowcount
        return rowcount

    def patch_column(self, db: Session, entity_id: int, column: str, value: Any) -> int:
        return self.replace(db, entity_id, {column: value})

    def remove(self, db: Session, entity_id: int) -> int:
        q = (
            delete(self.model)
            .where(self.model.id == entity_id)
            .execution_options(synchronize_session=False)
        )
        with _integrity_guard(db):
            rowcount = db.execute(q).rowcount
        return rowcount
