# helpdesk/user/services.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from helpdesk.core.errors import ConflictError, NotFoundError
from helpdesk.user.models import User
from helpdesk.user.schemas import UserCreate

logger = logging.getLogger(__name__)

def get_all_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.id).all()

def get_admins(db: Session) -> list[User]:
    return db.query(User).filter(User.admin.is_(True)).order_by(User.id).all()

def get_user(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).first()

def get_user_or_404(db: Session, user_id: int) -> User:
    user = get_user(db, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user

def create_user(db: Session, payload: UserCreate) -> User:
    db_user = User(**payload.model_dump())
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("A user with this email already exists")
    db.refresh(db_user)
    logger.info("Created %s %s", "admin" if db_user.admin else "user", db_user.id)
    return db_user
