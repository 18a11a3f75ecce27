# rental_api/models/payment.py
from sqlalchemy import Column, DateTime, Float, String
from sqlalchemy.orm import relationship

from rental_api.db.orm_registry import Base
from rental_api.db.refs import RefPolicy, id_column, ref_column

class Payment(Base):
    __tablename__ = "payments"

    id = id_column()
    booking_id = ref_column("bookings", RefPolicy.SET_NULL)
    amount = Column(Float)
    payment_date = Column(DateTime)
    status = Column(String(50))        # PENDING / COMPLETED / FAILED ...

    booking = relationship("Booking", lazy="joined")
