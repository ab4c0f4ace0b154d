# backend/routes/auth.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status, Request
from sqlalchemy.orm import Session

from database import get_db
from repositories import users as repo
from schemas.common import ERROR_RESPONSES
from schemas.user import LoginResponse, UserLogin, UserResponse
from utils.payload import body_of

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Auth"], responses={**ERROR_RESPONSES, 401: ERROR_RESPONSES[400]})


# Check plaintext credentials and return the matching user
@router.post("/login", response_model=LoginResponse)
def login(request: Request, payload: UserLogin = Depends(body_of(UserLogin)), db: Session = Depends(get_db)):
    if not payload.email or not payload.password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email and password are required")

    user = repo.login_user(db, payload.email, payload.password)
    if not user:
        client = request.client.host if request.client else None
        logger.warning(f"Failed login for {payload.email} from {client}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")

    # New public record; the password never leaves this function
    public_user = UserResponse.model_validate(user)
    return {"success": True, "message": "Login successful", "data": public_user}
