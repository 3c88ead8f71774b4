# helpdesk/ticket/services.py
import logging

from sqlalchemy.orm import Session
from helpdesk.core.errors import NotFoundError, RequesterMismatchError
from helpdesk.notification.notifications import NewComment, TicketAssigned, TicketCreated
from helpdesk.notification.services import notify
from helpdesk.requester.services import is_same_requester, resolve_requester
from helpdesk.ticket.models import Comment, Tag, Ticket, TicketStatus
from helpdesk.ticket.schemas import CommentCreate, TicketCreate, TicketUpdate
from helpdesk.user import services as user_service

logger = logging.getLogger(__name__)

def get_all_tickets(
    db: Session,
    status: int | None = None,
    requester_id: int | None = None,
    user_id: int | None = None,
) -> list[Ticket]:
    query = db.query(Ticket)
    if status is not None:
        query = query.filter(Ticket.status == int(status))
    if requester_id is not None:
        query = query.filter(Ticket.requester_id == requester_id)
    if user_id is not None:
        query = query.filter(Ticket.user_id == user_id)
    return query.order_by(Ticket.id).all()

def get_ticket(db: Session, ticket_id: int) -> Ticket | None:
    return db.query(Ticket).filter(Ticket.id == ticket_id).first()

def get_ticket_or_404(db: Session, ticket_id: int) -> Ticket:
    ticket = get_ticket(db, ticket_id)
    if not ticket:
        raise NotFoundError("Ticket not found")
    return ticket

def get_or_create_tags(db: Session, names: list[str]) -> list[Tag]:
    tags = []
    for name in names:
        tag = db.query(Tag).filter(Tag.name == name).first()
        if not tag:
            tag = Tag(name=name)
            db.add(tag)
        tags.append(tag)
    return tags

def create_ticket(db: Session, payload: TicketCreate) -> Ticket:
    requester = resolve_requester(db, payload.requester)
    db_ticket = Ticket(
        title=payload.title,
        body=payload.body,
        status=TicketStatus.NEW.value,
        requester=requester,
        tags=get_or_create_tags(db, payload.tags),
    )
    db.add(db_ticket)
    db.flush()
    notify(db, user_service.get_admins(db), TicketCreated(db_ticket))
    db.commit()
    db.refresh(db_ticket)
    logger.info("Ticket %s created for requester %s", db_ticket.id, requester.id)
    return db_ticket

def update_ticket(db: Session, ticket_id: int, payload: TicketUpdate) -> Ticket:
    db_ticket = get_ticket_or_404(db, ticket_id)
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    tags = changes.pop("tags", None)
    for field, value in changes.items():
        setattr(db_ticket, field, int(value) if field == "status" else value)
    if tags is not None:
        db_ticket.tags = get_or_create_tags(db, tags)
    db.commit()
    db.refresh(db_ticket)
    logger.info("Ticket %s updated: %s", db_ticket.id, sorted(payload.model_fields_set))
    return db_ticket

def next_status(current: int, requested: TicketStatus | None) -> int:
    """Status a ticket takes after a requester comment."""
    if requested is not None:
        return int(requested)
    if current == TicketStatus.SOLVED:
        return TicketStatus.OPEN.value
    return current

def add_comment(db: Session, ticket_id: int, payload: CommentCreate) -> Comment:
    db_ticket = get_ticket_or_404(db, ticket_id)
    if not is_same_requester(db_ticket.requester, payload.requester):
        raise RequesterMismatchError("Requester does not match the ticket requester")

    status = next_status(db_ticket.status, payload.new_status)
    if status != db_ticket.status:
        logger.info("Ticket %s status %s -> %s", db_ticket.id, db_ticket.status, status)
        db_ticket.status = status
    comment = Comment(ticket=db_ticket, body=payload.body, new_status=status)
    db.add(comment)
    db.flush()

    recipients = [db_ticket.user] if db_ticket.user else user_service.get_admins(db)
    notify(db, recipients, NewComment(db_ticket, comment))
    db.commit()
    db.refresh(comment)
    logger.info("Comment %s added to ticket %s", comment.id, db_ticket.id)
    return comment

def get_comments(db: Session, ticket_id: int) -> list[Comment]:
    return get_ticket_or_404(db, ticket_id).comments

def assign_ticket(db: Session, ticket_id: int, user_id: int) -> Ticket:
    db_ticket = get_ticket_or_404(db, ticket_id)
    user = user_service.get_user_or_404(db, user_id)
    db_ticket.user = user
    db.flush()
    notify(db, [user], TicketAssigned(db_ticket))
    db.commit()
    db.refresh(db_ticket)
    logger.info("Ticket %s assigned to user %s", db_ticket.id, user.id)
    return db_ticket
