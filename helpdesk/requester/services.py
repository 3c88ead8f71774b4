# helpdesk/requester/services.py
import logging

from sqlalchemy.orm import Session
from helpdesk.requester.models import Requester
from helpdesk.requester.schemas import RequesterIn

logger = logging.getLogger(__name__)

def find_requester(db: Session, name: str, email: str | None) -> Requester | None:
    """Requester with exactly this name and email. Never matches on a missing email."""
    if email is None:
        return None
    return (
        db.query(Requester)
        .filter(Requester.name == name, Requester.email == email)
        .order_by(Requester.id)
        .first()
    )

def resolve_requester(db: Session, payload: RequesterIn) -> Requester:
    requester = find_requester(db, payload.name, payload.email)
    if requester:
        return requester
    requester = Requester(name=payload.name, email=payload.email)
    db.add(requester)
    db.flush()
    logger.info("Created requester %s (%s)", requester.id, requester.name)
    return requester

def is_same_requester(requester: Requester, payload: RequesterIn) -> bool:
    return requester.name == payload.name and requester.email == payload.email
