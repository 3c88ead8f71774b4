# helpdesk/user/models.py

from sqlalchemy import Boolean, Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship
from helpdesk.core.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=True, unique=True)
    admin = Column(Boolean, default=False, nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())

    tickets = relationship("Ticket", back_populates="user", order_by="Ticket.id")
    notifications = relationship(
        "Notification", back_populates="user", order_by="Notification.id"
    )
