# backend/routes/users.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_db
from repositories import users as repo
from schemas.common import ERROR_RESPONSES, MessageResponse
from schemas.user import UserEnvelope, UserListEnvelope, UserPayload, UserResponse
from utils.payload import body_of

router = APIRouter(prefix="/api/users", tags=["Users"], responses=ERROR_RESPONSES)

USER_NOT_FOUND = "User not found"


def _check_required(payload: UserPayload) -> None:
    # Reject before any storage access
    if not payload.name or not payload.email:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Name and email are required")


# List all users
@router.get("", response_model=UserListEnvelope)
def list_users(db: Session = Depends(get_db)):
    return {"success": True, "data": repo.get_all_users(db)}


# Retrieve one user
@router.get("/{user_id}", response_model=UserEnvelope)
def get_user(user_id: int, db: Session = Depends(get_db)):
    user = repo.get_user_by_id(db, user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return {"success": True, "data": user}


# Create a user and echo it back with its new id
@router.post("", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserPayload = Depends(body_of(UserPayload)), db: Session = Depends(get_db)):
    _check_required(payload)
    user_id = repo.create_user(db, payload.name, payload.email, payload.password)
    return {"success": True, "data": UserResponse(id=user_id, name=payload.name, email=payload.email)}


# Replace a user's name and email
@router.put("/{user_id}", response_model=UserEnvelope)
def update_user(user_id: int, payload: UserPayload = Depends(body_of(UserPayload)), db: Session = Depends(get_db)):
    _check_required(payload)
    affected = repo.update_user(db, user_id, payload.name, payload.email, payload.password)
    if affected == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return {"success": True, "data": UserResponse(id=user_id, name=payload.name, email=payload.email)}


# Delete a user
@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    if repo.delete_user(db, user_id) == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return {"success": True, "message": "User deleted"}
