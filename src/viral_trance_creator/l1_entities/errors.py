"""Domain error types."""

from __future__ import annotations


class EnhancementError(Exception):
    """Base for failures of a chat-completion exchange."""


class TransportError(EnhancementError):
    """Raised when the chat API cannot be reached."""


class ApiError(EnhancementError):
    """Raised when the chat API answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(EnhancementError):
    """Raised when a response body is not valid JSON or lacks expected fields."""


class CoverConfigurationError(Exception):
    """Raised when cover generation is attempted without image API credentials."""


class CoverGenerationError(Exception):
    """Raised when the image API fails to produce a cover."""
