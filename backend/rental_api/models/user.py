# rental_api/models/user.py
from sqlalchemy import Column, String

from rental_api.db.orm_registry import Base
from rental_api.db.refs import id_column

class User(Base):
    __tablename__ = "users"

    id = id_column()
    username = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    # 평문 저장 (해싱/인증은 이 서비스 범위 밖)
    password = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False)
