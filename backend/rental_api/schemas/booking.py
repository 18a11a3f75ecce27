# rental_api/schemas/booking.py
from datetime import datetime
from typing import Optional

from rental_api.schemas.apartment import ApartmentOut
from rental_api.schemas.base import CamelModel, Ref
from rental_api.schemas.user import UserOut

class BookingIn(CamelModel):
    id: Optional[int] = None
    user: Optional[Ref] = None
    apartment: Optional[Ref] = None
    booking_date: Optional[datetime] = None
    status: Optional[str] = None

class BookingOut(CamelModel):
    id: int
    user: Optional[UserOut] = None
    apartment: Optional[ApartmentOut] = None
    booking_date: Optional[datetime] = None
    status: Optional[str] = None
