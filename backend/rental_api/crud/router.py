# rental_api/crud/router.py
import json
from typing import Annotated, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Request, Response
from sqlalchemy.orm import Session

from rental_api.crud.config import ResourceConfig
from rental_api.crud.service import CrudService
from rental_api.db.db_connection import get_db
from rental_api.schemas.base import INT64_MAX, INT64_MIN

# 경로 id도 64비트 범위 밖이면 422
EntityId = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]


async def raw_text_body(request: Request) -> str:
    """
    본문을 그대로 문자열로 받음 (content-type 무관, 공백도 그대로 보존).
    JSON 문자열 리터럴("http://x/img.png")로 오면 따옴표를 벗겨냄.
    """
    try:
        text = (await request.body()).decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="body must be UTF-8 text") from None
    literal = text.strip()
    if len(literal) >= 2 and literal[0] == literal[-1] == '"':
        try:
            decoded = json.loads(literal)
        except ValueError:
            return text
        if isinstance(decoded, str):
            return decoded
    return text


def build_router(resource: ResourceConfig) -> APIRouter:
    service = CrudService(resource)
    SchemaIn = resource.schema_in
    SchemaOut = resource.schema_out

    router = APIRouter(prefix=f"/api/{resource.path}", tags=[resource.path])

    @router.get("", response_model=List[SchemaOut], responses={204: {"description": "No rows"}})
    def list_all(db: Session = Depends(get_db)):
        items = service.list_all(db)
        if not items and resource.empty_list_no_content:
            return Response(status_code=204)
        return items

    @router.get("/{entity_id}", response_model=SchemaOut)
    def get_by_id(entity_id: EntityId, db: Session = Depends(get_db)):
        return service.get_by_id(db, entity_id)

    # reject_null_create 인 리소스만 본문 생략을 허용하고 서비스에서 거절
    body_default = None if resource.reject_null_create else ...

    @router.post("", response_model=SchemaOut, status_code=201)
    def create(payload: Optional[SchemaIn] = Body(body_default), db: Session = Depends(get_db)):
        return service.create(db, payload)

    @router.put("/{entity_id}", response_model=SchemaOut)
    def update(entity_id: EntityId, payload: SchemaIn = Body(...), db: Session = Depends(get_db)):
        return service.update(db, entity_id, payload)

    @router.delete("/{entity_id}", status_code=204)
    def delete(entity_id: EntityId, db: Session = Depends(get_db)):
        service.delete(db, entity_id)
        return Response(status_code=204)

    for segment, column in resource.patchable.items():
        _add_patch_route(router, service, SchemaOut, segment, column)

    return router


def _add_patch_route(router: APIRouter, service: CrudService, schema_out, segment: str, column: str) -> None:
    @router.patch(f"/{{entity_id}}/{segment}", response_model=schema_out, name=f"patch_{segment}")
    def patch(entity_id: EntityId, value: str = Depends(raw_text_body), db: Session = Depends(get_db)):
        return service.patch_field(db, entity_id, column, value)
