# app/user/models.py
from sqlalchemy import Boolean, Column, String
from app.core.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=True)
    email = Column(String, unique=True, nullable=True)
    is_admin = Column(Boolean, default=False, nullable=False)
    is_tutor = Column(Boolean, default=False, nullable=False)
