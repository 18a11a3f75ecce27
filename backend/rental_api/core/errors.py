# rental_api/core/errors.py
"""Typed failures raised by the CRUD services and their HTTP mappings."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

log = logging.getLogger(__name__)


class RentalError(Exception):
    """Base class for every failure the service layer raises on purpose."""


class NotFound(RentalError):
    def __init__(self, resource: str, entity_id: int):
        self.resource = resource
        self.entity_id = entity_id
        super().__init__(f"{resource} with id {entity_id} not found")


class InvalidInput(RentalError):
    pass


class ConflictingState(RentalError):
    pass


async def _not_found(request: Request, exc: NotFound) -> Response:
    log.info(f"{request.method} {request.url.path}: {exc}")
    return Response(status_code=404)


async def _conflict(request: Request, exc: ConflictingState) -> JSONResponse:
    log.warning(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=409, content={"detail": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    # InvalidInput에는 핸들러를 두지 않음 -> 기본 500 경로
    app.add_exception_handler(NotFound, _not_found)
    app.add_exception_handler(ConflictingState, _conflict)


__all__ = [
    "RentalError",
    "NotFound",
    "InvalidInput",
    "ConflictingState",
    "register_error_handlers",
]
