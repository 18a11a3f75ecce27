# rental_api/models/feedback.py
from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import relationship

from rental_api.db.orm_registry import Base
from rental_api.db.refs import RefPolicy, id_column, ref_column

class Feedback(Base):
    __tablename__ = "feedbacks"

    id = id_column()
    user_id = ref_column("users", RefPolicy.SET_NULL)
    apartment_id = ref_column("apartments", RefPolicy.SET_NULL)
    rating = Column(Integer)           # 1~5
    comment = Column(Text)

    user = relationship("User", lazy="joined")
    apartment = relationship("Apartment", lazy="joined")
