"""
repositories/tasks.py
---------------------
Data access for maintenance tasks (the maintenance_logs table).
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from database import commit_or_rollback
from models.task import Task, DEFAULT_STATUS


def get_all_tasks(db: Session, user_id: Optional[int] = None, status: Optional[str] = None) -> List[Task]:
    """List tasks, newest first, optionally narrowed to one user or status."""
    query = db.query(Task)

    if user_id is not None:
        query = query.filter(Task.user_id == user_id)
    if status:
        query = query.filter(Task.status == status)

    return query.order_by(Task.created_at.desc(), Task.id.desc()).all()


def get_task_by_id(db: Session, task_id: int) -> Optional[Task]:
    return db.query(Task).filter(Task.id == task_id).first()


def create_task(
    db: Session,
    user_id: Optional[int],
    title: str,
    description: Optional[str] = None,
    status: Optional[str] = None,
) -> int:
    task = Task(user_id=user_id, title=title, description=description, status=status or DEFAULT_STATUS)
    db.add(task)
    commit_or_rollback(db)
    db.refresh(task)
    return task.id


def update_task(
    db: Session,
    task_id: int,
    title: str,
    description: Optional[str] = None,
    status: Optional[str] = None,
    user_id: Optional[int] = None,
) -> int:
    """
    Overwrite title and description of one task.

    Status and owner are only changed when a value is given.
    Returns the number of rows matched.
    """
    values = {Task.title: title, Task.description: description}
    if status:
        values[Task.status] = status
    if user_id is not None:
        values[Task.user_id] = user_id

    affected = db.query(Task).filter(Task.id == task_id).update(values, synchronize_session=False)
    commit_or_rollback(db)
    return affected


def delete_task(db: Session, task_id: int) -> int:
    affected = db.query(Task).filter(Task.id == task_id).delete(synchronize_session=False)
    commit_or_rollback(db)
    return affected
