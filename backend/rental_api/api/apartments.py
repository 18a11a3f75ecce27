# rental_api/api/apartments.py
from rental_api.crud import ResourceConfig, build_router
from rental_api.models.apartment import Apartment
from rental_api.schemas.apartment import ApartmentIn, ApartmentOut

# 아파트 목록은 비어 있어도 200 [] (다른 리소스는 204)
RESOURCE = ResourceConfig(
    label="Apartment",
    path="apartments",
    model=Apartment,
    schema_in=ApartmentIn,
    schema_out=ApartmentOut,
    empty_list_no_content=False,
    reject_null_create=True,
)

router = build_router(RESOURCE)
