# rental_api/db/orm_registry.py
from __future__ import annotations

from typing import TYPE_CHECKING
from sqlalchemy.orm import declarative_base

# 모든 ORM 모델이 상속할 단일 Base
Base = declarative_base()

if TYPE_CHECKING:  # pragma: no cover
    from rental_api.models.apartment import Apartment  # noqa: F401
    from rental_api.models.booking import Booking      # noqa: F401

def import_all_models() -> None:
    """
    모델 모듈을 명시적으로 로드해 Base.metadata에 테이블을 등록.
    - 앱 부팅(create_all), Alembic env, 테스트 픽스처에서 호출.
    """
    import importlib

    for mod in (
        "rental_api.models.apartment",
        "rental_api.models.user",
        "rental_api.models.booking",
        "rental_api.models.payment",
        "rental_api.models.installment_plan",
        "rental_api.models.inventory",
        "rental_api.models.feedback",
    ):
        importlib.import_module(mod)

__all__ = ["Base", "import_all_models"]
