# app/user/services.py
from sqlalchemy.orm import Session
from app.core.errors import UserNotFoundError
from app.user.models import User

def get_user(db: Session, user_id: str) -> User | None:
    return db.query(User).filter(User.id == user_id).first()

def require_user(db: Session, user_id: str) -> User:
    user = get_user(db, user_id)
    if not user:
        raise UserNotFoundError()
    return user
