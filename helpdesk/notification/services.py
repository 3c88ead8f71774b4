# helpdesk/notification/services.py
import logging
from datetime import datetime, timezone
from typing import Iterable

from sqlalchemy.orm import Session
from helpdesk.core.config import get_settings
from helpdesk.core.errors import NotFoundError
from helpdesk.notification.models import Notification
from helpdesk.notification.notifications import TicketNotification
from helpdesk.user.models import User

logger = logging.getLogger(__name__)


def _deliver_database(db: Session, user: User, notification: TicketNotification) -> None:
    db.add(
        Notification(
            user_id=user.id,
            type=notification.type,
            ticket_id=notification.ticket.id,
            data=notification.to_payload(),
        )
    )


def _deliver_mail(db: Session, user: User, notification: TicketNotification) -> None:
    if not user.email:
        logger.debug("User %s has no email, skipping mail for %s", user.id, notification.type)
        return
    logger.info(
        "Mail from %s to %s <%s>: %s",
        get_settings().MAIL_FROM,
        user.name,
        user.email,
        notification.subject,
    )


CHANNELS = {
    "database": _deliver_database,
    "mail": _deliver_mail,
}


def notify(db: Session, recipients: Iterable[User], notification: TicketNotification) -> None:
    """Send ``notification`` to every recipient on each enabled channel.

    Delivery is fire and forget: a failing channel is logged and skipped.
    Rows written by the database channel are committed by the caller.
    """
    channels = get_settings().notification_channels
    for user in recipients:
        for channel in channels:
            deliver = CHANNELS.get(channel)
            if deliver is None:
                logger.warning("Unknown notification channel %r", channel)
                continue
            try:
                deliver(db, user, notification)
            except Exception:
                logger.exception(
                    "Could not deliver %s to user %s via %s", notification.type, user.id, channel
                )
                continue
            logger.info(
                "Sent %s for ticket %s to user %s via %s",
                notification.type,
                notification.ticket.id,
                user.id,
                channel,
            )


def get_notifications(db: Session, user_id: int, unread: bool = False) -> list[Notification]:
    query = db.query(Notification).filter(Notification.user_id == user_id)
    if unread:
        query = query.filter(Notification.read_at.is_(None))
    return query.order_by(Notification.id).all()


def mark_as_read(db: Session, user_id: int, notification_id: int) -> Notification:
    notification = (
        db.query(Notification)
        .filter(Notification.id == notification_id, Notification.user_id == user_id)
        .first()
    )
    if not notification:
        raise NotFoundError("Notification not found")
    if notification.read_at is None:
        notification.read_at = datetime.now(timezone.utc)
        db.commit()
        db.refresh(notification)
    return notification
