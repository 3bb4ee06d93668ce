"""Virtual assistant replies for the client support chat."""

from __future__ import annotations

import logging
from typing import Callable, Protocol, Sequence

from ...models.domain import ChatMessage, MessageSender
from .client import GeminiClient

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are the virtual assistant of a field-service company. Help the customer with basic "
    "technical questions, maintenance scheduling or the status of their service orders. "
    "Be brief and professional."
)
EMPTY_REPLY = "Sorry, I could not process your request right now."
FAILURE_REPLY = "We are experiencing technical difficulties. Please try again later."


class CompletionClient(Protocol):
    def generate(self, prompt: str) -> str: ...


def build_prompt(history: Sequence[ChatMessage], message: str) -> str:
    lines = [SYSTEM_PROMPT, "", "History:"]
    for entry in history:
        speaker = "Client" if entry.sender == MessageSender.USER else "Assistant"
        lines.append(f"{speaker}: {entry.text}")
    lines.append(f"Client: {message}")
    lines.append("Assistant:")
    return "\n".join(lines)


class AssistantService:
    def __init__(self, client_factory: Callable[[], CompletionClient] = GeminiClient) -> None:
        self.client_factory = client_factory

    def reply(self, history: Sequence[ChatMessage], message: str) -> str:
        """Generate the assistant's next message. Never raises; failures yield a fallback reply."""

        prompt = build_prompt(history, message)
        try:
            text = self.client_factory().generate(prompt)
        except Exception as exc:
            logger.error(f"Assistant completion failed: {exc}")
            return FAILURE_REPLY
        return text.strip() or EMPTY_REPLY
