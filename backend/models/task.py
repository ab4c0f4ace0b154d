# backend/models/task.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, func
from database import Base

DEFAULT_STATUS = "pending"

# Represents a maintenance task, optionally assigned to a user
class Task(Base):
    __tablename__ = "maintenance_logs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(50), nullable=False, default=DEFAULT_STATUS, server_default=DEFAULT_STATUS)

    # Set by the database on insert
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
