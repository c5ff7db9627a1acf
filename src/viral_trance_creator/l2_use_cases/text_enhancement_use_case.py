"""Use case: best-effort text enrichment through the chat-completion client."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from viral_trance_creator.l1_entities.chat_message import ChatMessage, ChatRequest
from viral_trance_creator.l1_entities.config import SamplingConfig, TextEnhancementConfig
from viral_trance_creator.l1_entities.enrichment import Enrichment
from viral_trance_creator.l1_entities.errors import ParseError
from viral_trance_creator.l1_entities.viral_analysis import ViralAnalysis, default_viral_analysis
from viral_trance_creator.l2_use_cases.ports.llm_client import LLMClient
from viral_trance_creator.l2_use_cases.utils.prompt_builder import (
    ENHANCE_SYSTEM_PROMPT,
    SPIRIT_SYSTEM_PROMPT,
    VIRAL_SYSTEM_PROMPT,
    build_enhance_user_message,
    build_spirit_user_message,
    build_viral_user_message,
    strip_code_fences,
)

log = logging.getLogger('vtc.llm')


class TextEnhancementClient:
    """Prompt enhancement, viral analysis and spiritual enrichment.

    None of the public operations raise: every failure is logged and the
    result is flagged as a fallback carrying the original input (or the
    fixed default analysis).
    """

    def __init__(self, llm_client: LLMClient, config: TextEnhancementConfig) -> None:
        self._llm = llm_client
        self._config = config

    def is_available(self) -> bool:
        return self._llm.has_api_key()

    async def enhance_prompt(self, prompt: str, mood: str = 'euphoric') -> Enrichment[str]:
        try:
            content = await self._complete(
                ENHANCE_SYSTEM_PROMPT,
                build_enhance_user_message(prompt, mood),
                self._config.enhance,
            )
        except Exception as e:
            return self._fallback('Prompt enhancement', prompt, e)
        return Enrichment(value=content)

    async def analyze_viral_potential(self, title: str, description: str) -> Enrichment[ViralAnalysis]:
        try:
            content = await self._complete(
                VIRAL_SYSTEM_PROMPT,
                build_viral_user_message(title, description),
                self._config.viral,
            )
            analysis = parse_viral_analysis(content)
        except Exception as e:
            return self._fallback('Viral analysis', default_viral_analysis(), e)
        log.info('Viral analysis for %r: score=%s', title, analysis.viral_score)
        return Enrichment(value=analysis)

    async def enrich_spiritual_content(self, content: str) -> Enrichment[str]:
        try:
            enriched = await self._complete(
                SPIRIT_SYSTEM_PROMPT,
                build_spirit_user_message(content),
                self._config.spirit,
            )
        except Exception as e:
            return self._fallback('Spiritual enrichment', content, e)
        return Enrichment(value=enriched)

    async def _complete(self, system_prompt: str, user_message: str, sampling: SamplingConfig) -> str:
        request = ChatRequest(
            model=self._config.model,
            messages=[
                ChatMessage(role='system', content=system_prompt),
                ChatMessage(role='user', content=user_message),
            ],
            temperature=sampling.temperature,
            max_tokens=sampling.max_tokens,
        )
        resp = await self._llm.chat(request)
        content = resp.first_content
        if content is None:
            raise ParseError('Empty response from chat API')
        log.debug('LLM raw response (%d chars): %s', len(content), content[:500])
        return content

    @staticmethod
    def _fallback(operation: str, value, error: Exception) -> Enrichment:
        err = f'{operation} failed: {type(error).__name__}: {error}'
        log.error(err, exc_info=True)
        return Enrichment.degraded(value, err)


def parse_viral_analysis(content: str) -> ViralAnalysis:
    """Parse a (possibly fenced) JSON body into a ViralAnalysis. Raises ParseError."""
    try:
        return ViralAnalysis.model_validate(json.loads(strip_code_fences(content)))
    except (ValueError, ValidationError) as e:
        raise ParseError(f'Invalid viral analysis body: {e}') from e
