# rental_api/api/users.py
from rental_api.crud import ResourceConfig, build_router
from rental_api.models.user import User
from rental_api.schemas.user import UserIn, UserOut

RESOURCE = ResourceConfig(
    label="User",
    path="users",
    model=User,
    schema_in=UserIn,
    schema_out=UserOut,
)

router = build_router(RESOURCE)
