# rental_api/api/installment_plans.py
from rental_api.crud import ResourceConfig, build_router
from rental_api.models.installment_plan import InstallmentPlan
from rental_api.schemas.installment_plan import InstallmentPlanIn, InstallmentPlanOut

RESOURCE = ResourceConfig(
    label="InstallmentPlan",
    path="installment-plans",
    model=InstallmentPlan,
    schema_in=InstallmentPlanIn,
    schema_out=InstallmentPlanOut,
    relations={"payment": "payment_id"},
)

router = build_router(RESOURCE)
