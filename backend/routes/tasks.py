# backend/routes/tasks.py
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from database import get_db
from models.task import DEFAULT_STATUS
from repositories import tasks as repo
from schemas.common import ERROR_RESPONSES, MessageResponse
from schemas.task import TaskEnvelope, TaskListEnvelope, TaskPayload, TaskResponse
from utils.payload import body_of

router = APIRouter(prefix="/api/tasks", tags=["Tasks"], responses=ERROR_RESPONSES)

TASK_NOT_FOUND = "Task not found"


def _check_required(payload: TaskPayload) -> None:
    if not payload.title:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Title is required")


# List tasks, newest first
@router.get("", response_model=TaskListEnvelope)
def list_tasks(
    user_id: Optional[int] = Query(None, description="Only tasks assigned to this user"),
    status: Optional[str] = Query(None, description="Only tasks in this status"),
    db: Session = Depends(get_db),
):
    return {"success": True, "data": repo.get_all_tasks(db, user_id=user_id, status=status)}


# Retrieve one task
@router.get("/{task_id}", response_model=TaskEnvelope)
def get_task(task_id: int, db: Session = Depends(get_db)):
    task = repo.get_task_by_id(db, task_id)
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TASK_NOT_FOUND)
    return {"success": True, "data": task}


# Create a task; status falls back to "pending"
@router.post("", response_model=TaskEnvelope, status_code=status.HTTP_201_CREATED)
def create_task(payload: TaskPayload = Depends(body_of(TaskPayload)), db: Session = Depends(get_db)):
    _check_required(payload)
    task_status = payload.status or DEFAULT_STATUS
    task_id = repo.create_task(db, payload.user_id, payload.title, payload.description, task_status)
    created = TaskResponse(
        id=task_id,
        user_id=payload.user_id,
        title=payload.title,
        description=payload.description,
        status=task_status,
    )
    return {"success": True, "data": created}


# Update a task and echo the submitted fields
@router.put("/{task_id}", response_model=TaskEnvelope)
def update_task(task_id: int, payload: TaskPayload = Depends(body_of(TaskPayload)), db: Session = Depends(get_db)):
    _check_required(payload)
    affected = repo.update_task(db, task_id, payload.title, payload.description, payload.status, payload.user_id)
    if affected == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TASK_NOT_FOUND)
    updated = TaskResponse(
        id=task_id,
        user_id=payload.user_id,
        title=payload.title,
        description=payload.description,
        status=payload.status,
    )
    return {"success": True, "data": updated}


# Delete a task
@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(task_id: int, db: Session = Depends(get_db)):
    if repo.delete_task(db, task_id) == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TASK_NOT_FOUND)
    return {"success": True, "message": "Task deleted"}
