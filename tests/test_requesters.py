# tests/test_requesters.py
from helpdesk.requester.models import Requester
from helpdesk.requester.schemas import RequesterIn
from helpdesk.requester.services import resolve_requester


def test_resolve_reuses_requester_with_same_name_and_email(db, make_requester):
    existing = make_requester(name="Bruce Wayne", email="bruce@wayne.com")

    resolved = resolve_requester(db, RequesterIn(name="Bruce Wayne", email="bruce@wayne.com"))

    assert resolved.id == existing.id


def test_resolve_needs_both_name_and_email_to_match(db, make_requester):
    make_requester(name="Bruce Wayne", email="bruce@wayne.com")

    resolve_requester(db, RequesterIn(name="Batman", email="bruce@wayne.com"))
    resolve_requester(db, RequesterIn(name="Bruce Wayne", email="batman@cave.com"))
    db.commit()

    assert db.query(Requester).count() == 3
