from typing import Optional

from sqlalchemy.orm import Session

from app.models.user import User


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def create_user(db: Session, user: User) -> User:
    db.add(user)
    db.flush()
    return user


def count_users(db: Session) -> int:
    return db.query(User).count()

