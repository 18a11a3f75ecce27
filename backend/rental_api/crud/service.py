# rental_api/crud/service.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel
from sqlalchemy.orm import Session

from rental_api.core.errors import InvalidInput, NotFound
from rental_api.crud.config import ResourceConfig
from rental_api.crud.gateway import Gateway

log = logging.getLogger(__name__)


class CrudService:
    """Not-found and validation semantics over a :class:`Gateway`."""

    def __init__(self, resource: ResourceConfig):
        self.resource = resource
        self.gateway = Gateway(resource.model)

    def _values(self, payload: BaseModel) -> Dict[str, Any]:
        # id는 항상 버림; 참조 {"id": N} 는 FK 컬럼 값으로 풀어줌
        relations = self.resource.relations
        values = payload.model_dump(exclude={"id", *relations})
        for field, column in relations.items():
            ref = getattr(payload, field)
            values[column] = ref.id if ref is not None else None
        return values

    def list_all(self, db: Session) -> List[Any]:
        return self.gateway.list(db)

    def get_by_id(self, db: Session, entity_id: int) -> Any:
        entity = self.gateway.find(db, entity_id)
        if entity is None:
            raise NotFound(self.resource.label, entity_id)
        return entity

    def create(self, db: Session, payload: Optional[BaseModel]) -> Any:
        if payload is None and self.resource.reject_null_create:
            raise InvalidInput(f"{self.resource.label} cannot be null")
        entity = self.gateway.store(db, self._values(payload))
        log.info(f"created {self.resource.label} id={entity.id}")
        return entity

    def update(self, db: Session, entity_id: int, payload: BaseModel) -> Any:
        """Whole-row replace; fields missing from the payload are written as their defaults."""
        if self.gateway.replace(db, entity_id, self._values(payload)) == 0:
            raise NotFound(self.resource.label, entity_id)
        log.info(f"updated {self.resource.label} id={entity_id}")
        return self.get_by_id(db, entity_id)

    def patch_field(self, db: Session, entity_id: int, column: str, value: Any) -> Any:
        if self.gateway.patch_column(db, entity_id, column, value) == 0:
            raise NotFound(self.resource.label, entity_id)
        log.info(f"patched {self.resource.label} id={entity_id} {column}")
        return self.get_by_id(db, entity_id)

    def delete(self, db: Session, entity_id: int) -> None:
        if self.gateway.remove(db, entity_id) == 0:
            raise NotFound(self.resource.label, entity_id)
        log.info(f"deleted {self.resource.label} id={entity_id}")
