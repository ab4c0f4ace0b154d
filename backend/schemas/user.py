from pydantic import BaseModel, ConfigDict
from typing import List, Optional

# Incoming user fields; presence is checked by the route so a missing
# field is a 400 rather than a schema error
class UserPayload(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

# Schema for login credentials
class UserLogin(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    email: Optional[str] = None
    password: Optional[str] = None

# Public view of a user, never carries the password
class UserResponse(BaseModel):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class UserEnvelope(BaseModel):
    success: bool = True
    data: UserResponse

class UserListEnvelope(BaseModel):
    success: bool = True
    data: List[UserResponse]

# Successful login response
class LoginResponse(BaseModel):
    success: bool = True
    message: str
    data: UserResponse
