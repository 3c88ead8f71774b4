# tests/conftest.py
import os

import pytest
from fastapi.testclient import TestClient

# Settings are read once, point them at an in-memory database before importing the app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["API_TOKEN"] = "the-api-token"

from helpdesk.core.database import Base, SessionLocal, engine, get_db  # noqa: E402
from helpdesk.main import app  # noqa: E402
from helpdesk.requester.models import Requester  # noqa: E402
from helpdesk.ticket.models import Ticket, TicketStatus  # noqa: E402
from helpdesk.user.models import User  # noqa: E402

TOKEN = {"token": "the-api-token"}


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app, headers=TOKEN) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def factory(name="Jane Agent", email=None, admin=False):
        user = User(name=name, email=email, admin=admin)
        db.add(user)
        db.commit()
        return user

    return factory


@pytest.fixture
def make_requester(db):
    def factory(name="Bruce Wayne", email="bruce@wayne.com"):
        requester = Requester(name=name, email=email)
        db.add(requester)
        db.commit()
        return requester

    return factory


@pytest.fixture
def make_ticket(db, make_requester):
    def factory(status=TicketStatus.NEW, requester=None, title="Printer on fire", body="Help"):
        ticket = Ticket(
            title=title,
            body=body,
            status=int(status),
            requester=requester or make_requester(),
        )
        db.add(ticket)
        db.commit()
        return ticket

    return factory
