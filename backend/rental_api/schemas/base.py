# rental_api/schemas/base.py
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# DB 컬럼은 64비트 정수 (BIGINT)
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]


class CamelModel(BaseModel):
    # 프런트는 camelCase(photoUrl, bookingDate ...)로 주고받음
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Ref(CamelModel):
    """Weak reference to another row, sent as ``{"id": N}``."""
    id: Int64
