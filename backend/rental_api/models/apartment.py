# rental_api/models/apartment.py
from sqlalchemy import Boolean, Column, Float, Integer, String, Text

from rental_api.db.orm_registry import Base
from rental_api.db.refs import id_column

class Apartment(Base):
    __tablename__ = "apartments"

    id = id_column()
    location = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    size = Column(Integer, nullable=False)
    features = Column(Text)
    photo_url = Column(String(2048))     # 목록 카드용 대표 사진
    available = Column(Boolean)
