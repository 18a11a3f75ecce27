# rental_api/api/bookings.py
from rental_api.crud import ResourceConfig, build_router
from rental_api.models.booking import Booking
from rental_api.schemas.booking import BookingIn, BookingOut

RESOURCE = ResourceConfig(
    label="Booking",
    path="bookings",
    model=Booking,
    schema_in=BookingIn,
    schema_out=BookingOut,
    relations={"user": "user_id", "apartment": "apartment_id"},
)

router = build_router(RESOURCE)
