# rental_api/schemas/installment_plan.py
from typing import Optional

from rental_api.schemas.base import CamelModel, Int64, Ref
from rental_api.schemas.payment import PaymentOut

class InstallmentPlanIn(CamelModel):
    id: Optional[int] = None
    payment: Optional[Ref] = None
    installments: Int64 = 0
    monthly_amount: float = 0.0
    schedule: Optional[str] = None

class InstallmentPlanOut(CamelModel):
    id: int
    payment: Optional[PaymentOut] = None
    installments: int
    monthly_amount: float
    schedule: Optional[str] = None
