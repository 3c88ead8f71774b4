# helpdesk/ticket/routes.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from helpdesk.core.database import get_db
from helpdesk.core.security import require_api_token
from helpdesk.ticket.schemas import (
    CommentCreate,
    CommentOut,
    TicketAssign,
    TicketCreate,
    TicketDetail,
    TicketOut,
    TicketUpdate,
)
from helpdesk.ticket import services as ticket_service

router = APIRouter(
    prefix="/tickets",
    tags=["Tickets"],
    dependencies=[Depends(require_api_token)],
)


@router.post("", status_code=201)
def create(ticket: TicketCreate, db: Session = Depends(get_db)):
    created = ticket_service.create_ticket(db, ticket)
    return {"data": {"id": created.id}}


@router.get("")
def list_all(
    status: int | None = Query(default=None, description="Filter by status code: 1 new, 2 open, 3 pending, 4 solved"),
    requester: int | None = Query(default=None, description="Filter by requester id"),
    assigned: int | None = Query(default=None, description="Filter by assigned user id"),
    db: Session = Depends(get_db),
):
    items = ticket_service.get_all_tickets(
        db, status=status, requester_id=requester, user_id=assigned
    )
    return {"data": [TicketOut.model_validate(t) for t in items]}


@router.get("/{ticket_id}")
def get(ticket_id: int, db: Session = Depends(get_db)):
    ticket = ticket_service.get_ticket_or_404(db, ticket_id)
    return {"data": TicketDetail.model_validate(ticket)}


@router.put("/{ticket_id}")
def update(ticket_id: int, ticket: TicketUpdate, db: Session = Depends(get_db)):
    updated = ticket_service.update_ticket(db, ticket_id, ticket)
    return {"data": TicketOut.model_validate(updated)}


@router.get("/{ticket_id}/comments")
def list_comments(ticket_id: int, db: Session = Depends(get_db)):
    comments = ticket_service.get_comments(db, ticket_id)
    return {"data": [CommentOut.model_validate(c) for c in comments]}


@router.post("/{ticket_id}/comments", status_code=201)
def comment(ticket_id: int, comment: CommentCreate, db: Session = Depends(get_db)):
    created = ticket_service.add_comment(db, ticket_id, comment)
    return {"data": {"id": created.id}}


@router.post("/{ticket_id}/assign", status_code=201)
def assign(ticket_id: int, payload: TicketAssign, db: Session = Depends(get_db)):
    assigned = ticket_service.assign_ticket(db, ticket_id, payload.user)
    return {"data": {"id": assigned.id, "user_id": assigned.user_id}}
