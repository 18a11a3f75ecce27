# rental_api/schemas/payment.py
from datetime import datetime
from typing import Optional

from rental_api.schemas.base import CamelModel, Ref
from rental_api.schemas.booking import BookingOut

class PaymentIn(CamelModel):
    id: Optional[int] = None
    booking: Optional[Ref] = None
    amount: Optional[float] = None
    payment_date: Optional[datetime] = None
    status: Optional[str] = None

class PaymentOut(CamelModel):
    id: int
    booking: Optional[BookingOut] = None
    amount: Optional[float] = None
    payment_date: Optional[datetime] = None
    status: Optional[str] = None
