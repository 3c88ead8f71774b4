# helpdesk/ticket/schemas.py
from datetime import datetime

from pydantic import BaseModel, Field, field_validator
from helpdesk.core.sanitize import strip_tags
from helpdesk.requester.schemas import RequesterIn, RequesterOut
from helpdesk.ticket.models import TicketStatus


def _clean_text(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = strip_tags(value)
    if not cleaned.strip():
        raise ValueError("must not be empty")
    return cleaned


def _clean_tags(value: list[str] | None) -> list[str] | None:
    if value is None:
        return None
    names = []
    for name in value:
        name = strip_tags(name).strip()
        if name and name not in names:
            names.append(name)
    return names


class TicketBase(BaseModel):
    title: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1)

    @field_validator("title", "body")
    @classmethod
    def sanitize(cls, value: str) -> str:
        return _clean_text(value)

class TicketCreate(TicketBase):
    requester: RequesterIn
    tags: list[str] = Field(default_factory=list)

    @field_validator("tags")
    @classmethod
    def sanitize_tags(cls, value: list[str]) -> list[str]:
        return _clean_tags(value)

class TicketUpdate(BaseModel):
    title: str | None = None
    body: str | None = None
    status: TicketStatus | None = None
    tags: list[str] | None = None

    @field_validator("title", "body")
    @classmethod
    def sanitize(cls, value: str | None) -> str | None:
        return _clean_text(value)

    @field_validator("tags")
    @classmethod
    def sanitize_tags(cls, value: list[str] | None) -> list[str] | None:
        return _clean_tags(value)

class TicketAssign(BaseModel):
    user: int

class CommentCreate(BaseModel):
    requester: RequesterIn
    body: str = Field(..., min_length=1)
    new_status: TicketStatus | None = None

    @field_validator("body")
    @classmethod
    def sanitize(cls, value: str) -> str:
        return _clean_text(value)

class CommentOut(BaseModel):
    id: int
    ticket_id: int
    body: str
    new_status: TicketStatus
    created_at: datetime | None = None

    model_config = {"from_attributes": True}

class TicketOut(BaseModel):
    id: int
    title: str
    body: str
    status: TicketStatus
    requester_id: int
    user_id: int | None = None
    tags: list[str] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}

    @field_validator("tags", mode="before")
    @classmethod
    def tag_names(cls, value):
        return [getattr(tag, "name", tag) for tag in value or []]

class TicketDetail(TicketOut):
    requester: RequesterOut
    comments: list[CommentOut] = []
