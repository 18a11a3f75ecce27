# rental_api/api/payments.py
from rental_api.crud import ResourceConfig, build_router
from rental_api.models.payment import Payment
from rental_api.schemas.payment import PaymentIn, PaymentOut

RESOURCE = ResourceConfig(
    label="Payment",
    path="payments",
    model=Payment,
    schema_in=PaymentIn,
    schema_out=PaymentOut,
    relations={"booking": "booking_id"},
)

router = build_router(RESOURCE)
