# helpdesk/notification/notifications.py
"""Kinds of notifications sent about a ticket.

Each kind knows its ``type`` name, the subject line used by the mail channel
and the payload stored by the database channel.
"""


class TicketNotification:
    type = "TicketNotification"
    subject_template = "Ticket #{id}"

    def __init__(self, ticket):
        self.ticket = ticket

    @property
    def subject(self) -> str:
        return self.subject_template.format(id=self.ticket.id, title=self.ticket.title)

    def to_payload(self) -> dict:
        return {
            "ticket_id": self.ticket.id,
            "title": self.ticket.title,
            "status": int(self.ticket.status),
        }


class TicketCreated(TicketNotification):
    type = "TicketCreated"
    subject_template = "New ticket #{id}: {title}"

    def to_payload(self) -> dict:
        payload = super().to_payload()
        payload["requester"] = self.ticket.requester.name
        return payload


class TicketAssigned(TicketNotification):
    type = "TicketAssigned"
    subject_template = "Ticket #{id} assigned to you: {title}"


class NewComment(TicketNotification):
    type = "NewComment"
    subject_template = "New comment on ticket #{id}: {title}"

    def __init__(self, ticket, comment):
        super().__init__(ticket)
        self.comment = comment

    def to_payload(self) -> dict:
        payload = super().to_payload()
        payload["comment_id"] = self.comment.id
        return payload
