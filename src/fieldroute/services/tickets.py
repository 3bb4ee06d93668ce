"""Client support tickets and their message threads."""

from __future__ import annotations

from typing import Callable

from ..data.repository import Repository
from ..models.domain import ChatMessage, MessageSender, Ticket, TicketStatus
from ..models.patches import TicketPatch
from .records import new_id, parse_timestamp, utc_now


class TicketService:
    def __init__(self, repository: Repository[Ticket], clock: Callable = utc_now) -> None:
        self.repository = repository
        self.clock = clock

    def list_tickets(self, client_id: str | None = None) -> list[Ticket]:
        """Tickets newest first, optionally for one client."""

        tickets = [
            ticket for ticket in self.repository.list() if client_id is None or ticket.client_id == client_id
        ]
        return sorted(tickets, key=lambda ticket: parse_timestamp(ticket.created_at), reverse=True)

    def get_ticket(self, ticket_id: str) -> Ticket:
        return self.repository.get(ticket_id)

    def open_ticket(self, *, client_id: str, client_name: str, subject: str, description: str) -> Ticket:
        ticket = Ticket(
            id=new_id("t"),
            client_id=client_id,
            client_name=client_name or "Customer",
            subject=subject or "Subject",
            description=description,
            status=TicketStatus.OPEN,
            created_at=self.clock().isoformat(),
            messages=[],
        )
        return self.repository.add(ticket, prepend=True)

    def update_ticket(self, ticket_id: str, patch: TicketPatch) -> Ticket:
        return self.repository.apply(ticket_id, patch)

    def add_message(self, ticket_id: str, sender: MessageSender, text: str) -> Ticket:
        if not text.strip():
            raise ValueError("Message text must not be empty.")
        message = ChatMessage(id=new_id("m"), sender=sender, text=text, timestamp=self.clock().isoformat())

        def _append(ticket: Ticket) -> Ticket:
            ticket.messages.append(message)
            return ticket

        return self.repository.update(ticket_id, _append)
