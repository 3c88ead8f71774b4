# helpdesk/notification/schemas.py
from datetime import datetime

from pydantic import BaseModel

class NotificationOut(BaseModel):
    id: int
    user_id: int
    type: str
    ticket_id: int | None = None
    data: dict
    created_at: datetime | None = None
    read_at: datetime | None = None

    model_config = {"from_attributes": True}
