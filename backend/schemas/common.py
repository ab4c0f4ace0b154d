from pydantic import BaseModel
from typing import Dict

# Confirmation returned by delete endpoints
class MessageResponse(BaseModel):
    success: bool = True
    message: str

# Body of every error response
class ErrorResponse(BaseModel):
    success: bool = False
    error: str

class HealthResponse(BaseModel):
    status: str
    database: str
    timestamp: str

class ApiInfo(BaseModel):
    message: str
    endpoints: Dict[str, str]

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}
