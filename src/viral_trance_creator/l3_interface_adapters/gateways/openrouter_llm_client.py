"""Gateway: OpenRouter chat client — implements LLMClient port.

OpenRouter speaks the OpenAI chat-completions protocol, so the openai SDK
does the transport; this module only pins the endpoint, the identification
headers and the error mapping.
"""

from __future__ import annotations

import logging

import openai

from viral_trance_creator.l1_entities.chat_message import ChatChoice, ChatMessage, ChatRequest, ChatResponse
from viral_trance_creator.l1_entities.errors import ApiError, ParseError, TransportError

log = logging.getLogger('vtc.gateway')

OPENROUTER_BASE_URL = 'https://openrouter.ai/api/v1'
DEFAULT_REFERER = 'https://viral-trance-creator.replit.app'
DEFAULT_TITLE = 'Viral Trance Creator'


class OpenRouterLLMClient:
    """Wraps openai.AsyncOpenAI pointed at OpenRouter to implement the LLMClient protocol."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = OPENROUTER_BASE_URL,
        referer: str = DEFAULT_REFERER,
        title: str = DEFAULT_TITLE,
    ) -> None:
        self._api_key = api_key or ''
        self._base_url = base_url
        self._headers = {'HTTP-Referer': referer, 'X-Title': title}
        if not self._api_key:
            log.warning('OPENROUTER_API_KEY not configured')

    def has_api_key(self) -> bool:
        return bool(self._api_key)

    async def chat(self, request: ChatRequest) -> ChatResponse:
        # max_retries=0: exactly one POST per call.
        client = openai.AsyncOpenAI(
            api_key=self._api_key,
            base_url=self._base_url,
            default_headers=self._headers,
            max_retries=0,
        )
        kwargs: dict = {}
        if request.temperature is not None:
            kwargs['temperature'] = request.temperature
        if request.max_tokens is not None:
            kwargs['max_tokens'] = request.max_tokens
        try:
            resp = await client.chat.completions.create(
                model=request.model,
                messages=[m.model_dump() for m in request.messages],  # ty: ignore[invalid-argument-type] -- dict satisfies ChatCompletionMessageParam at runtime
                **kwargs,
            )
        except openai.APIConnectionError as e:
            raise TransportError(f'OpenRouter unreachable: {e}') from e
        except openai.APIStatusError as e:
            raise ApiError(e.status_code, f'OpenRouter API error: {e.status_code} {_reason(e)}') from e
        except (openai.APIResponseValidationError, ValueError) as e:
            raise ParseError(f'OpenRouter returned an unreadable body: {e}') from e
        return _to_chat_response(resp)


def _reason(error: openai.APIStatusError) -> str:
    reason = getattr(error.response, 'reason_phrase', '')
    return reason or error.message


def _to_chat_response(resp) -> ChatResponse:
    choices = getattr(resp, 'choices', None)
    if choices is None:
        raise ParseError('OpenRouter response has no choices')
    return ChatResponse(
        choices=[
            ChatChoice(message=ChatMessage(role='assistant', content=choice.message.content or ''))
            for choice in choices
        ],
    )
