"""Gateway: Gemini cover client — implements CoverPromptEnhancer and CoverImageGenerator ports."""

from __future__ import annotations

import logging
from pathlib import Path

from google import genai
from google.genai import types

from viral_trance_creator.l1_entities.errors import CoverGenerationError
from viral_trance_creator.l1_entities.track import TrackDescriptor

log = logging.getLogger('vtc.gateway')

DEFAULT_TEXT_MODEL = 'gemini-2.5-pro'
DEFAULT_IMAGE_MODEL = 'gemini-2.0-flash-preview-image-generation'


def build_cover_enhancement_request(track: TrackDescriptor, base_prompt: str) -> str:
    """Instruction asking the text model to refine *base_prompt* into a visual prompt."""
    tags = ', '.join(track.tags) if track.tags else 'none'
    return (
        'You are an art director for electronic music releases. '
        'Rewrite the following album cover prompt into one richer, more visual image prompt. '
        'Keep every color, element and format requirement it already states.\n\n'
        f'Track: "{track.title}" by {track.artist_name or "Unknown Artist"}\n'
        f'Tags: {tags}\n\n'
        f'Prompt:\n{base_prompt}\n\n'
        'Reply with the improved prompt only.'
    )


class GeminiCoverClient:
    """Wraps google-genai's async client for prompt refinement and image rendering."""

    def __init__(
        self,
        api_key: str | None = None,
        text_model: str = DEFAULT_TEXT_MODEL,
        image_model: str = DEFAULT_IMAGE_MODEL,
    ) -> None:
        self._api_key = api_key or ''
        self._text_model = text_model
        self._image_model = image_model

    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def enhance_cover_prompt(self, track: TrackDescriptor, base_prompt: str) -> str:
        client = genai.Client(api_key=self._api_key)
        resp = await client.aio.models.generate_content(
            model=self._text_model,
            contents=build_cover_enhancement_request(track, base_prompt),
        )
        text = (resp.text or '').strip()
        if not text:
            raise ValueError('Empty prompt enhancement from Gemini')
        log.debug('Enhanced cover prompt (%d chars): %s', len(text), text[:500])
        return text

    async def generate_cover_image(self, prompt: str, output_path: Path) -> None:
        client = genai.Client(api_key=self._api_key)
        resp = await client.aio.models.generate_content(
            model=self._image_model,
            contents=prompt,
            config=types.GenerateContentConfig(response_modalities=['TEXT', 'IMAGE']),
        )
        image = _first_image_bytes(resp)
        if image is None:
            raise CoverGenerationError('Gemini returned no image data')
        output_path.write_bytes(image)
        log.debug('Wrote %d image bytes to %s', len(image), output_path)


def _first_image_bytes(resp) -> bytes | None:
    for candidate in resp.candidates or []:
        content = candidate.content
        if content is None:
            continue
        for part in content.parts or []:
            if part.inline_data is not None and part.inline_data.data:
                return part.inline_data.data
    return None
