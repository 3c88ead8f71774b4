# helpdesk/requester/models.py

from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship
from helpdesk.core.database import Base

class Requester(Base):
    __tablename__ = "requesters"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    # not unique: several requesters may have no email at all
    email = Column(String, nullable=True, index=True)
    created_at = Column(DateTime, server_default=func.now())

    tickets = relationship("Ticket", back_populates="requester", order_by="Ticket.id")
