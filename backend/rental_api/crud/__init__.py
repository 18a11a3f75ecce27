from .config import ResourceConfig
from .gateway import Gateway
from .router import build_router
from .service import CrudService

__all__ = ["ResourceConfig", "Gateway", "CrudService", "build_router"]
