# rental_api/schemas/inventory.py
from typing import Optional

from rental_api.schemas.apartment import ApartmentOut
from rental_api.schemas.base import CamelModel, Int64, Ref

class InventoryIn(CamelModel):
    id: Optional[int] = None
    apartment: Optional[Ref] = None
    stock: Int64 = 0
    status: Optional[str] = None
    photo_url: Optional[str] = None

class InventoryOut(CamelModel):
    id: int
    apartment: Optional[ApartmentOut] = None
    stock: int
    status: Optional[str] = None
    photo_url: Optional[str] = None
