from .apartments import router as apartments_router
from .bookings import router as bookings_router
from .feedbacks import router as feedbacks_router
from .installment_plans import router as installment_plans_router
from .inventories import router as inventories_router
from .payments import router as payments_router
from .users import router as users_router

ROUTERS = [
    apartments_router,
    bookings_router,
    feedbacks_router,
    installment_plans_router,
    inventories_router,
    payments_router,
    users_router,
]

__all__ = ["ROUTERS"]
