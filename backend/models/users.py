# backend/models/users.py
from sqlalchemy import Column, Integer, String
from database import Base

# Represents an application user; the password is stored as given
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    password = Column(String(255), nullable=True)
