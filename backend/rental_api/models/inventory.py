# rental_api/models/inventory.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from rental_api.db.orm_registry import Base
from rental_api.db.refs import RefPolicy, id_column, ref_column

class Inventory(Base):
    __tablename__ = "inventories"

    id = id_column()
    # 아파트당 재고 행 하나 (one-to-one)
    apartment_id = ref_column("apartments", RefPolicy.SET_NULL, unique=True)
    stock = Column(Integer, nullable=False, default=0)
    status = Column(String(50))
    photo_url = Column(String(2048))

    apartment = relationship("Apartment", lazy="joined")
