# helpdesk/ticket/models.py
import enum

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, Text, func
from sqlalchemy.orm import relationship
from helpdesk.core.database import Base

class TicketStatus(enum.IntEnum):
    NEW = 1
    OPEN = 2
    PENDING = 3
    SOLVED = 4

ticket_tags = Table(
    "ticket_tags",
    Base.metadata,
    Column("ticket_id", Integer, ForeignKey("tickets.id"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id"), primary_key=True),
)

class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, index=True, nullable=False)
    body = Column(Text, nullable=False)
    status = Column(Integer, default=TicketStatus.NEW.value, nullable=False, index=True)
    requester_id = Column(Integer, ForeignKey("requesters.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    requester = relationship("Requester", back_populates="tickets")
    user = relationship("User", back_populates="tickets")
    tags = relationship("Tag", secondary=ticket_tags, back_populates="tickets", order_by="Tag.name")
    comments = relationship("Comment", back_populates="ticket", order_by="Comment.id")

class Tag(Base):
    __tablename__ = "tags"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)

    tickets = relationship("Ticket", secondary=ticket_tags, back_populates="tags")

class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    ticket_id = Column(Integer, ForeignKey("tickets.id"), nullable=False, index=True)
    body = Column(Text, nullable=False)
    # ticket status right after this comment
    new_status = Column(Integer, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    ticket = relationship("Ticket", back_populates="comments")
