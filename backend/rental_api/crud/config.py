# rental_api/crud/config.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Type

from pydantic import BaseModel


@dataclass(frozen=True)
class ResourceConfig:
    """
    리소스 하나(엔티티 하나)를 CRUD 라우터/서비스로 만들기 위한 설정.

    - relations: 입력 스키마의 참조 필드 -> FK 컬럼 (예: "apartment" -> "apartment_id")
    - empty_list_no_content: 목록이 비면 200 [] 대신 204
    - reject_null_create: 본문 없는 생성 요청을 InvalidInput 으로 거절
    - patchable: 부분 수정 경로 -> 컬럼 (예: "photo" -> "photo_url")
    """

    label: str
    path: str
    model: type
    schema_in: Type[BaseModel]
    schema_out: Type[BaseModel]
    relations: Mapping[str, str] = field(default_factory=dict)
    empty_list_no_content: bool = True
    reject_null_create: bool = False
    patchable: Mapping[str, str] = field(default_factory=dict)
