"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from viral_trance_creator.l1_entities.config import AppConfig
from viral_trance_creator.l2_use_cases.cover_generation_use_case import CoverGenerationClient
from viral_trance_creator.l2_use_cases.ports.llm_client import LLMClient
from viral_trance_creator.l2_use_cases.text_enhancement_use_case import TextEnhancementClient
from viral_trance_creator.l3_interface_adapters.gateways.gemini_cover_client import GeminiCoverClient
from viral_trance_creator.l3_interface_adapters.gateways.openrouter_llm_client import OpenRouterLLMClient
from viral_trance_creator.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from viral_trance_creator.l4_frameworks_and_drivers.infra_config import InfraConfig


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(self, config: AppConfig, infra: InfraConfig | None = None) -> None:
        self.config = config

        _infra = infra or InfraConfig().with_env_secrets()
        self.llm_client: LLMClient = OpenRouterLLMClient(
            api_key=_infra.openrouter.api_key,
            base_url=_infra.openrouter.base_url,
            referer=_infra.openrouter.referer,
            title=_infra.openrouter.title,
        )
        self.cover_gateway = GeminiCoverClient(
            api_key=_infra.gemini.api_key,
            text_model=_infra.gemini.text_model,
            image_model=_infra.gemini.image_model,
        )

        self.text_client = TextEnhancementClient(self.llm_client, config.text)
        self.cover_client = CoverGenerationClient(
            prompt_enhancer=self.cover_gateway,
            image_generator=self.cover_gateway,
            config=config.cover,
        )

    @staticmethod
    def config_loader() -> YamlConfigLoader:
        return YamlConfigLoader()
