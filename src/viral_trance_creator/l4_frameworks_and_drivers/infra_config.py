"""Infrastructure provider configs — lives in L4, not domain."""

from __future__ import annotations

import copy
import os
from collections.abc import Mapping

from pydantic import BaseModel, Field

from viral_trance_creator.l1_entities.config import AppConfig
from viral_trance_creator.l3_interface_adapters.gateways.gemini_cover_client import (
    DEFAULT_IMAGE_MODEL,
    DEFAULT_TEXT_MODEL,
)
from viral_trance_creator.l3_interface_adapters.gateways.openrouter_llm_client import (
    DEFAULT_REFERER,
    DEFAULT_TITLE,
    OPENROUTER_BASE_URL,
)
from viral_trance_creator.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'text': {
        'model': 'openai/gpt-4o-mini',
        'enhance': {'temperature': 0.8, 'max_tokens': 300},
        'viral': {'temperature': 0.3, 'max_tokens': 500},
        'spirit': {'temperature': 0.7, 'max_tokens': 400},
    },
    'cover': {
        'output_dir': './generated_covers',
        'web_prefix': '/generated_covers',
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)


class OpenRouterProviderConfig(BaseModel):
    api_key: str | None = None  # None → OPENROUTER_API_KEY env
    base_url: str = OPENROUTER_BASE_URL
    referer: str = DEFAULT_REFERER
    title: str = DEFAULT_TITLE


class GeminiProviderConfig(BaseModel):
    api_key: str | None = None  # None → GEMINI_API_KEY env
    text_model: str = DEFAULT_TEXT_MODEL
    image_model: str = DEFAULT_IMAGE_MODEL


class InfraConfig(BaseModel):
    """Groups all provider-specific settings outside the domain layer."""

    openrouter: OpenRouterProviderConfig = Field(default_factory=OpenRouterProviderConfig)
    gemini: GeminiProviderConfig = Field(default_factory=GeminiProviderConfig)

    def with_env_secrets(self, environ: Mapping[str, str] | None = None) -> InfraConfig:
        """Return a copy whose unset API keys are filled from the environment."""
        env = os.environ if environ is None else environ
        openrouter = self.openrouter
        if openrouter.api_key is None:
            openrouter = openrouter.model_copy(update={'api_key': env.get('OPENROUTER_API_KEY')})
        gemini = self.gemini
        if gemini.api_key is None:
            gemini = gemini.model_copy(update={'api_key': env.get('GEMINI_API_KEY')})
        return self.model_copy(update={'openrouter': openrouter, 'gemini': gemini})
