# rental_api/models/booking.py
from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import relationship

from rental_api.db.orm_registry import Base
from rental_api.db.refs import RefPolicy, id_column, ref_column

class Booking(Base):
    __tablename__ = "bookings"

    id = id_column()
    user_id = ref_column("users", RefPolicy.SET_NULL)
    apartment_id = ref_column("apartments", RefPolicy.SET_NULL)
    booking_date = Column(DateTime)
    status = Column(String(50))        # PENDING / CONFIRMED / CANCELLED ...

    user = relationship("User", lazy="joined")
    apartment = relationship("Apartment", lazy="joined")
