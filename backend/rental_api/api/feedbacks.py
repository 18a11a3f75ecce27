# rental_api/api/feedbacks.py
from rental_api.crud import ResourceConfig, build_router
from rental_api.models.feedback import Feedback
from rental_api.schemas.feedback import FeedbackIn, FeedbackOut

RESOURCE = ResourceConfig(
    label="Feedback",
    path="feedbacks",
    model=Feedback,
    schema_in=FeedbackIn,
    schema_out=FeedbackOut,
    relations={"user": "user_id", "apartment": "apartment_id"},
)

router = build_router(RESOURCE)
