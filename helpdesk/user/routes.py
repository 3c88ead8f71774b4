# helpdesk/user/routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from helpdesk.core.database import get_db
from helpdesk.core.security import require_api_token
from helpdesk.user.schemas import UserCreate, UserOut
from helpdesk.user import services as user_service

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    dependencies=[Depends(require_api_token)],
)


@router.post("", status_code=201)
def create(user: UserCreate, db: Session = Depends(get_db)):
    created = user_service.create_user(db, user)
    return {"data": {"id": created.id}}


@router.get("")
def list_all(db: Session = Depends(get_db)):
    users = user_service.get_all_users(db)
    return {"data": [UserOut.model_validate(u) for u in users]}


@router.get("/{user_id}")
def get(user_id: int, db: Session = Depends(get_db)):
    return {"data": UserOut.model_validate(user_service.get_user_or_404(db, user_id))}
