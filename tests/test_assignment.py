# tests/test_assignment.py
from helpdesk.notification.models import Notification


def test_can_assign_ticket_to_user(client, db, make_ticket, make_user):
    user = make_user()
    other = make_user(name="Other agent")
    ticket = make_ticket()
    assert ticket.user is None

    r = client.post(f"/api/tickets/{ticket.id}/assign", json={"user": user.id})
    assert r.status_code == 201

    db.refresh(ticket)
    assert ticket.user.id == user.id

    sent = db.query(Notification).filter(Notification.type == "TicketAssigned").all()
    assert len(sent) == 1
    assert sent[0].user_id == user.id
    assert sent[0].data["ticket_id"] == ticket.id
    assert other.id not in {n.user_id for n in sent}


def test_assign_to_unknown_user_returns_404(client, db, make_ticket):
    ticket = make_ticket()

    r = client.post(f"/api/tickets/{ticket.id}/assign", json={"user": 424242})
    assert r.status_code == 404
    assert r.json() == {"error": "User not found"}

    db.refresh(ticket)
    assert ticket.user_id is None


def test_assign_unknown_ticket_returns_404(client, make_user):
    user = make_user()
    r = client.post("/api/tickets/9999999/assign", json={"user": user.id})
    assert r.status_code == 404


def test_assigned_tickets_can_be_listed(client, make_ticket, make_user):
    user = make_user()
    mine = make_ticket()
    make_ticket()
    client.post(f"/api/tickets/{mine.id}/assign", json={"user": user.id})

    r = client.get("/api/tickets", params={"assigned": user.id})
    assert [t["id"] for t in r.json()["data"]] == [mine.id]
