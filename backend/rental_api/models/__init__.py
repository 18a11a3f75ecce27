from .apartment import Apartment
from .user import User
from .booking import Booking
from .payment import Payment
from .installment_plan import InstallmentPlan
from .inventory import Inventory
from .feedback import Feedback

__all__ = [
    "Apartment",
    "User",
    "Booking",
    "Payment",
    "InstallmentPlan",
    "Inventory",
    "Feedback",
]
