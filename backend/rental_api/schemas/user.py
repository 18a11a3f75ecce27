# rental_api/schemas/user.py
from typing import Optional

from rental_api.schemas.base import CamelModel

class UserIn(CamelModel):
    id: Optional[int] = None
    username: str
    email: str
    password: str
    role: str

class UserOut(CamelModel):
    id: int
    username: str
    email: str
    password: str
    role: str
