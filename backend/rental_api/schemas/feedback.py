# rental_api/schemas/feedback.py
from typing import Optional

from rental_api.schemas.apartment import ApartmentOut
from rental_api.schemas.base import CamelModel, Int64, Ref
from rental_api.schemas.user import UserOut

class FeedbackIn(CamelModel):
    id: Optional[int] = None
    user: Optional[Ref] = None
    apartment: Optional[Ref] = None
    rating: Optional[Int64] = None
    comment: Optional[str] = None

class FeedbackOut(CamelModel):
    id: int
    user: Optional[UserOut] = None
    apartment: Optional[ApartmentOut] = None
    rating: Optional[int] = None
    comment: Optional[str] = None
