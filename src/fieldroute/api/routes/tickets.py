"""Support ticket endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...data.repository import NotFoundError
from ...models.domain import Ticket
from ...schemas.tickets import MessageCreateRequest, TicketCreateRequest, TicketUpdateRequest
from ...services.container import Services
from ..dependencies import get_services

router = APIRouter(prefix="/tickets", tags=["tickets"])


@router.get("", response_model=List[Ticket], status_code=status.HTTP_200_OK)
def list_tickets(
    client_id: Optional[str] = Query(default=None),
    services: Services = Depends(get_services),
) -> List[Ticket]:
    return services.tickets.list_tickets(client_id)


@router.post("", response_model=Ticket, status_code=status.HTTP_201_CREATED)
def open_ticket(payload: TicketCreateRequest, services: Services = Depends(get_services)) -> Ticket:
    return services.tickets.open_ticket(
        client_id=payload.client_id,
        client_name=payload.client_name,
        subject=payload.subject,
        description=payload.description,
    )


@router.patch("/{ticket_id}", response_model=Ticket, status_code=status.HTTP_200_OK)
def update_ticket(ticket_id: str, payload: TicketUpdateRequest, services: Services = Depends(get_services)) -> Ticket:
    try:
        return services.tickets.update_ticket(ticket_id, payload.to_patch())
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.post("/{ticket_id}/messages", response_model=Ticket, status_code=status.HTTP_201_CREATED)
def add_message(ticket_id: str, payload: MessageCreateRequest, services: Services = Depends(get_services)) -> Ticket:
    try:
        return services.tickets.add_message(ticket_id, payload.sender, payload.text)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
