"""Use case: generate cover art for a track and persist it under the output directory."""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Callable
from pathlib import Path

from viral_trance_creator.l1_entities.config import CoverConfig
from viral_trance_creator.l1_entities.cover_style import CoverStyle
from viral_trance_creator.l1_entities.errors import CoverConfigurationError, CoverGenerationError
from viral_trance_creator.l1_entities.track import TrackDescriptor
from viral_trance_creator.l2_use_cases.ports.cover_generator import CoverImageGenerator, CoverPromptEnhancer
from viral_trance_creator.l2_use_cases.utils.cover_prompt_builder import build_cover_prompt, get_cover_styles

log = logging.getLogger('vtc.cover')


def make_cover_filename(title: str, timestamp_ms: int) -> str:
    """Sanitized title (non-alphanumerics replaced by ``_``) plus a millisecond timestamp."""
    safe_title = re.sub(r'[^a-zA-Z0-9]', '_', title)
    return f'{safe_title}_{timestamp_ms}.png'


class CoverGenerationClient:
    """Builds a cover prompt, optionally enhances it, renders the image, returns its web path."""

    def __init__(
        self,
        prompt_enhancer: CoverPromptEnhancer,
        image_generator: CoverImageGenerator,
        config: CoverConfig,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._enhancer = prompt_enhancer
        self._generator = image_generator
        self._output_dir = Path(config.output_dir)
        self._web_prefix = config.web_prefix.rstrip('/')
        self._clock = clock

    async def generate_cover(self, track: TrackDescriptor, style: str = 'neon') -> str:
        """Generate a cover for *track*. Returns the web-relative image path.

        Raises CoverConfigurationError when no image credentials are set and
        CoverGenerationError when the image call fails. Prompt enhancement
        failures only downgrade to the base prompt.
        """
        if not self._generator.is_configured():
            raise CoverConfigurationError('Image API credentials not configured - GEMINI_API_KEY required')

        base_prompt = build_cover_prompt(track, style)
        prompt = await self._enhance(track, base_prompt)

        filename = make_cover_filename(track.title, int(self._clock() * 1000))
        image_path = self._output_dir / filename

        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            await self._generator.generate_cover_image(prompt, image_path)
        except Exception as e:
            log.error('Cover generation failed for track %d: %s', track.id, e, exc_info=True)
            raise CoverGenerationError(f'Failed to generate cover artwork: {e}') from e

        log.info('Cover for track %d written to %s', track.id, image_path)
        return f'{self._web_prefix}/{filename}'

    @staticmethod
    def get_cover_styles() -> list[CoverStyle]:
        return get_cover_styles()

    async def _enhance(self, track: TrackDescriptor, base_prompt: str) -> str:
        try:
            enhanced = await self._enhancer.enhance_cover_prompt(track, base_prompt)
        except Exception as e:
            log.warning('Cover prompt enhancement failed, using base prompt: %s', e, exc_info=True)
            return base_prompt
        if not enhanced.strip():
            log.warning('Cover prompt enhancement returned nothing, using base prompt')
            return base_prompt
        return enhanced
