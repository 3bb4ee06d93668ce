"""Virtual assistant chat endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...schemas.tickets import ChatRequest, ChatResponse
from ...services.container import Services
from ..dependencies import get_services

router = APIRouter(prefix="/assistant", tags=["assistant"])


@router.post("/chat", response_model=ChatResponse, status_code=status.HTTP_200_OK)
def chat(payload: ChatRequest, services: Services = Depends(get_services)) -> ChatResponse:
    history = [turn.to_message(index) for index, turn in enumerate(payload.history)]
    return ChatResponse(reply=services.assistant.reply(history, payload.message))
