# rental_api/schemas/apartment.py
from typing import Optional

from rental_api.schemas.base import CamelModel, Int64

class ApartmentIn(CamelModel):
    id: Optional[int] = None       # 무시됨 (생성 시 DB가 부여, 수정 시 경로 id)
    location: str
    price: float
    size: Int64
    features: Optional[str] = None
    photo_url: Optional[str] = None
    available: Optional[bool] = None

class ApartmentOut(CamelModel):
    id: int
    location: str
    price: float
    size: int
    features: Optional[str] = None
    photo_url: Optional[str] = None
    available: Optional[bool] = None
