# helpdesk/notification/routes.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from helpdesk.core.database import get_db
from helpdesk.core.security import require_api_token
from helpdesk.notification.schemas import NotificationOut
from helpdesk.notification import services as notification_service
from helpdesk.user import services as user_service

router = APIRouter(
    prefix="/users/{user_id}/notifications",
    tags=["Notifications"],
    dependencies=[Depends(require_api_token)],
)


@router.get("")
def list_all(
    user_id: int,
    unread: bool = Query(default=False, description="Only notifications not read yet"),
    db: Session = Depends(get_db),
):
    user_service.get_user_or_404(db, user_id)
    items = notification_service.get_notifications(db, user_id, unread=unread)
    return {"data": [NotificationOut.model_validate(n) for n in items]}


@router.post("/{notification_id}/read")
def read(user_id: int, notification_id: int, db: Session = Depends(get_db)):
    notification = notification_service.mark_as_read(db, user_id, notification_id)
    return {"data": NotificationOut.model_validate(notification)}
