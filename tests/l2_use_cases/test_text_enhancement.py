"""Tests for TextEnhancementClient — uses FakeLLMClient."""

from __future__ import annotations

import json

import pytest

from viral_trance_creator.l1_entities.errors import ApiError, ParseError, TransportError
from viral_trance_creator.l1_entities.viral_analysis import default_viral_analysis
from viral_trance_creator.l2_use_cases.text_enhancement_use_case import TextEnhancementClient, parse_viral_analysis
from viral_trance_creator.l2_use_cases.utils.prompt_builder import (
    ENHANCE_SYSTEM_PROMPT,
    SPIRIT_SYSTEM_PROMPT,
    VIRAL_SYSTEM_PROMPT,
)
from tests.conftest import FakeLLMClient

ANALYSIS = {
    'viralScore': 91,
    'strengths': ['Massive drop'],
    'improvements': ['Shorter intro'],
    'platforms': {'tiktok': 95, 'instagram': 88, 'youtube': 70, 'spotify': 82},
    'bestTimeToPost': 'Thursday 7 PM',
    'targetAudience': ['Festival goers'],
    'hashtagSuggestions': ['#trancefamily'],
}


def _client(fake_llm, default_config) -> TextEnhancementClient:
    return TextEnhancementClient(fake_llm, default_config.text)


class TestEnhancePrompt:
    @pytest.mark.asyncio
    async def test_success(self, fake_llm, default_config):
        fake_llm.set_response('Epic 138 BPM uplifting trance')
        result = await _client(fake_llm, default_config).enhance_prompt('uplifting trance')

        assert result.ok
        assert result.value == 'Epic 138 BPM uplifting trance'

    @pytest.mark.asyncio
    async def test_request_shape(self, fake_llm, default_config):
        await _client(fake_llm, default_config).enhance_prompt('uplifting trance', mood='melancholic')

        req = fake_llm.chat_calls[0]
        assert req.model == 'openai/gpt-4o-mini'
        assert [m.role for m in req.messages] == ['system', 'user']
        assert req.messages[0].content == ENHANCE_SYSTEM_PROMPT
        assert '"uplifting trance"' in req.messages[1].content
        assert 'melancholic' in req.messages[1].content
        assert req.temperature == 0.8
        assert req.max_tokens == 300

    @pytest.mark.asyncio
    async def test_default_mood_euphoric(self, fake_llm, default_config):
        await _client(fake_llm, default_config).enhance_prompt('x')
        assert 'euphoric' in fake_llm.chat_calls[0].messages[1].content

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'error',
        [TransportError('unreachable'), ApiError(401, 'OpenRouter API error: 401 Unauthorized'), ParseError('bad')],
    )
    async def test_failure_returns_original(self, fake_llm, default_config, error):
        fake_llm.set_error(error)
        result = await _client(fake_llm, default_config).enhance_prompt('keep me')

        assert result.fallback
        assert result.value == 'keep me'
        assert type(error).__name__ in result.error

    @pytest.mark.asyncio
    async def test_unexpected_exception_still_falls_back(self, fake_llm, default_config):
        fake_llm.set_error(ConnectionError('down'))
        result = await _client(fake_llm, default_config).enhance_prompt('keep me')
        assert result.value == 'keep me'
        assert result.fallback

    @pytest.mark.asyncio
    async def test_empty_response_returns_original(self, fake_llm, default_config):
        fake_llm.set_response('')
        result = await _client(fake_llm, default_config).enhance_prompt('keep me')
        assert result.value == 'keep me'
        assert result.fallback

    @pytest.mark.asyncio
    async def test_no_choices_returns_original(self, fake_llm, default_config):
        fake_llm.set_response(None)
        result = await _client(fake_llm, default_config).enhance_prompt('keep me')
        assert result.value == 'keep me'


class TestAnalyzeViralPotential:
    @pytest.mark.asyncio
    async def test_success(self, fake_llm, default_config):
        fake_llm.set_response(json.dumps(ANALYSIS))
        result = await _client(fake_llm, default_config).analyze_viral_potential('Skyline', 'Sunrise anthem')

        assert result.ok
        assert result.value.viral_score == 91
        assert result.value.platforms.tiktok == 95

    @pytest.mark.asyncio
    async def test_fenced_body_parses_like_unfenced(self, fake_llm, default_config):
        client = _client(fake_llm, default_config)
        fake_llm.set_response(json.dumps(ANALYSIS))
        plain = await client.analyze_viral_potential('t', 'd')
        fake_llm.set_response(f'```json\n{json.dumps(ANALYSIS, indent=2)}\n```')
        fenced = await client.analyze_viral_potential('t', 'd')

        assert fenced.ok
        assert fenced.value == plain.value

    @pytest.mark.asyncio
    async def test_request_shape(self, fake_llm, default_config):
        fake_llm.set_response(json.dumps(ANALYSIS))
        await _client(fake_llm, default_config).analyze_viral_potential('Skyline', 'Sunrise anthem')

        req = fake_llm.chat_calls[0]
        assert req.messages[0].content == VIRAL_SYSTEM_PROMPT
        assert req.messages[1].content == 'Title: "Skyline"\nDescription: "Sunrise anthem"'
        assert req.temperature == 0.3
        assert req.max_tokens == 500

    @pytest.mark.asyncio
    async def test_malformed_json_returns_default(self, fake_llm, default_config):
        fake_llm.set_response('Sure! Here is the analysis: {viralScore: high}')
        result = await _client(fake_llm, default_config).analyze_viral_potential('t', 'd')

        assert result.fallback
        assert result.value == default_viral_analysis()
        assert 'ParseError' in result.error

    @pytest.mark.asyncio
    async def test_wrong_shape_returns_default(self, fake_llm, default_config):
        fake_llm.set_response('{"score": 12}')
        result = await _client(fake_llm, default_config).analyze_viral_potential('t', 'd')
        assert result.value == default_viral_analysis()

    @pytest.mark.asyncio
    async def test_request_failure_returns_default(self, fake_llm, default_config):
        fake_llm.set_error(ApiError(500, 'OpenRouter API error: 500 Internal Server Error'))
        result = await _client(fake_llm, default_config).analyze_viral_potential('t', 'd')

        assert result.fallback
        assert result.value.viral_score == 75
        assert result.value.platforms.model_dump() == {'tiktok': 80, 'instagram': 75, 'youtube': 85, 'spotify': 90}

    @pytest.mark.asyncio
    async def test_default_not_derived_from_input(self, fake_llm, default_config):
        fake_llm.set_error(TransportError('down'))
        client = _client(fake_llm, default_config)
        a = await client.analyze_viral_potential('One', 'first')
        b = await client.analyze_viral_potential('Two', 'second')
        assert a.value == b.value


class TestEnrichSpiritualContent:
    @pytest.mark.asyncio
    async def test_success(self, fake_llm, default_config):
        fake_llm.set_response('Rising over Jerusalem')
        result = await _client(fake_llm, default_config).enrich_spiritual_content('Rising')

        assert result.ok
        assert result.value == 'Rising over Jerusalem'
        req = fake_llm.chat_calls[0]
        assert req.messages[0].content == SPIRIT_SYSTEM_PROMPT
        assert req.messages[1].content.endswith('Rising')
        assert req.temperature == 0.7
        assert req.max_tokens == 400

    @pytest.mark.asyncio
    async def test_failure_returns_original(self, fake_llm, default_config):
        fake_llm.set_error(TransportError('down'))
        result = await _client(fake_llm, default_config).enrich_spiritual_content('Rising')
        assert result.value == 'Rising'
        assert result.fallback


class TestIsAvailable:
    def test_true_with_key(self, default_config):
        fake = FakeLLMClient(api_key='sk-or-123')
        assert TextEnhancementClient(fake, default_config.text).is_available() is True
        assert fake.chat_calls == []

    def test_false_without_key(self, default_config):
        fake = FakeLLMClient(api_key='')
        assert TextEnhancementClient(fake, default_config.text).is_available() is False
        assert fake.chat_calls == []


class TestParseViralAnalysis:
    def test_raises_parse_error(self):
        with pytest.raises(ParseError):
            parse_viral_analysis('not json')

    def test_empty_object_raises_parse_error(self):
        with pytest.raises(ParseError):
            parse_viral_analysis('```json\n{}\n```')


class TestFractionalScores:
    @pytest.mark.asyncio
    async def test_fractional_scores_are_kept(self, fake_llm, default_config):
        body = dict(
            ANALYSIS,
            viralScore=82.5,
            platforms={'tiktok': 90, 'instagram': 77.5, 'youtube': 60.25, 'spotify': 88},
        )
        fake_llm.set_response(json.dumps(body))

        result = await _client(fake_llm, default_config).analyze_viral_potential('Skyline', 'Sunrise anthem')

        assert result.ok
        assert result.value.viral_score == 82.5
        assert result.value.platforms.instagram == 77.5
        assert result.value.platforms.youtube == 60.25

    @pytest.mark.asyncio
    async def test_fractional_score_out_of_range_falls_back(self, fake_llm, default_config):
        fake_llm.set_response(json.dumps(dict(ANALYSIS, viralScore=100.5)))
        result = await _client(fake_llm, default_config).analyze_viral_potential('t', 'd')
        assert result.fallback
        assert result.value == default_viral_analysis()
