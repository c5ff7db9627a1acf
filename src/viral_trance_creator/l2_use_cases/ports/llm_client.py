"""Port: chat-completion client."""

from __future__ import annotations

from typing import Protocol

from viral_trance_creator.l1_entities.chat_message import ChatRequest, ChatResponse


class LLMClient(Protocol):
    """Abstract chat-completion client. Zero framework types leak through."""

    async def chat(self, request: ChatRequest) -> ChatResponse:
        """Send one chat request.

        Raises TransportError, ApiError or ParseError on failure.
        """
        ...

    def has_api_key(self) -> bool:
        """Whether a credential is configured. Never touches the network."""
        ...
