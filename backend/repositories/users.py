"""
repositories/users.py
---------------------
Data access for the users table.

Every function takes the request's session first; the session borrows a
pooled connection on first use and returns it when the request closes it.
Storage errors propagate to the caller unchanged.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from database import commit_or_rollback
from models.users import User


def get_all_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id).all()


def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def create_user(db: Session, name: str, email: str, password: Optional[str] = None) -> int:
    """Insert a user and return the id assigned by the database."""
    user = User(name=name, email=email, password=password)
    db.add(user)
    commit_or_rollback(db)
    db.refresh(user)
    return user.id


def update_user(db: Session, user_id: int, name: str, email: str, password: Optional[str] = None) -> int:
    """
    Overwrite name and email (and password, when given) of one user.

    Returns:
        Number of rows matched; 0 means the user does not exist.
    """
    values = {User.name: name, User.email: email}
    if password is not None:
        values[User.password] = password

    affected = db.query(User).filter(User.id == user_id).update(values, synchronize_session=False)
    commit_or_rollback(db)
    return affected


def delete_user(db: Session, user_id: int) -> int:
    affected = db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
    commit_or_rollback(db)
    return affected


def login_user(db: Session, email: str, password: str) -> Optional[User]:
    """Return the user whose email and password both match, or None."""
    return (
        db.query(User)
        .filter(User.email == email, User.password == password)
        .first()
    )
