"""Ticket and assistant chat schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.domain import ChatMessage, MessageSender, TicketStatus
from ..models.patches import TicketPatch


class TicketCreateRequest(BaseModel):
    client_id: str
    client_name: str = ""
    subject: str = ""
    description: str = ""


class TicketUpdateRequest(BaseModel):
    subject: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TicketStatus] = None

    def to_patch(self) -> TicketPatch:
        return TicketPatch(**self.model_dump(exclude_unset=True, exclude_none=True))


class MessageCreateRequest(BaseModel):
    sender: MessageSender = MessageSender.USER
    text: str = Field(..., min_length=1)


class ChatTurn(BaseModel):
    sender: MessageSender
    text: str

    def to_message(self, index: int) -> ChatMessage:
        return ChatMessage(id=f"h{index}", sender=self.sender, text=self.text, timestamp="")


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1)
    history: List[ChatTurn] = Field(default_factory=list)


class ChatResponse(BaseModel):
    reply: str
