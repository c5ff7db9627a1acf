"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from pathlib import Path

import pytest

from viral_trance_creator.l1_entities.chat_message import ChatChoice, ChatMessage, ChatRequest, ChatResponse
from viral_trance_creator.l1_entities.config import AppConfig
from viral_trance_creator.l1_entities.track import Artist, AudioFeatures, TrackDescriptor
from viral_trance_creator.l4_frameworks_and_drivers.infra_config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeLLMClient:
    """Fake chat client for L2 use case tests."""

    def __init__(self, response: str | None = 'Fake LLM response', api_key: str = 'sk-test'):
        self._response = response
        self._error: Exception | None = None
        self._api_key = api_key
        self.chat_calls: list[ChatRequest] = []

    async def chat(self, request: ChatRequest) -> ChatResponse:
        self.chat_calls.append(request)
        if self._error is not None:
            raise self._error
        if self._response is None:
            return ChatResponse(choices=[])
        return ChatResponse(choices=[ChatChoice(message=ChatMessage(role='assistant', content=self._response))])

    def has_api_key(self) -> bool:
        return bool(self._api_key)

    def set_response(self, response: str | None) -> None:
        self._response = response

    def set_error(self, error: Exception) -> None:
        self._error = error


class FakeCoverGateway:
    """Fake cover gateway — implements both CoverPromptEnhancer and CoverImageGenerator."""

    def __init__(self, configured: bool = True, enhanced: str = 'Enhanced cover prompt'):
        self._configured = configured
        self._enhanced = enhanced
        self._enhance_error: Exception | None = None
        self._image_error: Exception | None = None
        self.enhance_calls: list[tuple[TrackDescriptor, str]] = []
        self.image_calls: list[tuple[str, Path]] = []

    def is_configured(self) -> bool:
        return self._configured

    async def enhance_cover_prompt(self, track: TrackDescriptor, base_prompt: str) -> str:
        self.enhance_calls.append((track, base_prompt))
        if self._enhance_error is not None:
            raise self._enhance_error
        return self._enhanced

    async def generate_cover_image(self, prompt: str, output_path: Path) -> None:
        self.image_calls.append((prompt, output_path))
        if self._image_error is not None:
            raise self._image_error
        output_path.write_bytes(b'\x89PNG fake')

    def fail_enhancement(self, error: Exception) -> None:
        self._enhance_error = error

    def fail_image(self, error: Exception) -> None:
        self._image_error = error


# --- Standard Fixtures ---


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    return FakeLLMClient()


@pytest.fixture
def fake_cover_gateway() -> FakeCoverGateway:
    return FakeCoverGateway()


@pytest.fixture
def sample_track() -> TrackDescriptor:
    return TrackDescriptor(
        id=7,
        title='Skyline: Rising!',
        artist=Artist(name='Aurora Drift'),
        audio_features=AudioFeatures(bpm=140, energy=0.6, valence=0.5),
        tags=['uplifting', 'vocal'],
    )


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
text:
  model: "anthropic/claude-3-haiku"
  viral:
    temperature: 0.1
    max_tokens: 800
cover:
  output_dir: "./covers"
openrouter:
  base_url: "https://example.test/api/v1"
gemini:
  image_model: "imagen-test"
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p
