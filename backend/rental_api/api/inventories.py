# rental_api/api/inventories.py
from rental_api.crud import ResourceConfig, build_router
from rental_api.models.inventory import Inventory
from rental_api.schemas.inventory import InventoryIn, InventoryOut

# PATCH /api/inventories/{id}/photo : 사진 URL만 부분 수정 (본문은 문자열 그대로)
RESOURCE = ResourceConfig(
    label="Inventory",
    path="inventories",
    model=Inventory,
    schema_in=InventoryIn,
    schema_out=InventoryOut,
    relations={"apartment": "apartment_id"},
    patchable={"photo": "photo_url"},
)

router = build_router(RESOURCE)
