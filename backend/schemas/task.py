from pydantic import BaseModel, ConfigDict, field_validator
from datetime import datetime
from typing import List, Optional

# Incoming task fields
class TaskPayload(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    user_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None

    # Form submissions send "" for an unselected user
    @field_validator("user_id", mode="before")
    @classmethod
    def _blank_user_id(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

# Output schema for task details
class TaskResponse(BaseModel):
    id: int
    user_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class TaskEnvelope(BaseModel):
    success: bool = True
    data: TaskResponse

class TaskListEnvelope(BaseModel):
    success: bool = True
    data: List[TaskResponse]
