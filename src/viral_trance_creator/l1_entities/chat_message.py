"""Chat entities — typed request/response shapes for chat-completion calls."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """A single message in an LLM conversation."""

    role: Literal['system', 'user', 'assistant']
    content: str


class ChatRequest(BaseModel):
    """One chat-completion request: model, ordered messages, optional sampling."""

    model: str
    messages: list[ChatMessage]
    temperature: float | None = Field(default=None, ge=0.0, le=1.0)
    max_tokens: int | None = Field(default=None, gt=0)


class ChatChoice(BaseModel):
    message: ChatMessage


class ChatResponse(BaseModel):
    """Response from a chat-completion call. Only the first choice is consumed."""

    choices: list[ChatChoice] = Field(default_factory=list)

    @property
    def first_content(self) -> str | None:
        if not self.choices:
            return None
        return self.choices[0].message.content or None
