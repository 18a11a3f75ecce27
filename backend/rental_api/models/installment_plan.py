# rental_api/models/installment_plan.py
from sqlalchemy import Column, Float, Integer, Text
from sqlalchemy.orm import relationship

from rental_api.db.orm_registry import Base
from rental_api.db.refs import RefPolicy, id_column, ref_column

class InstallmentPlan(Base):
    __tablename__ = "installment_plans"

    id = id_column()
    payment_id = ref_column("payments", RefPolicy.SET_NULL)
    installments = Column(Integer, nullable=False, default=0)
    monthly_amount = Column(Float, nullable=False, default=0.0)
    schedule = Column(Text)

    payment = relationship("Payment", lazy="joined")
