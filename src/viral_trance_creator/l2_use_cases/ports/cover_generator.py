"""Ports: cover prompt enhancement and cover image generation."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from viral_trance_creator.l1_entities.track import TrackDescriptor


class CoverPromptEnhancer(Protocol):
    """Refines a deterministic base prompt into a richer visual prompt."""

    async def enhance_cover_prompt(self, track: TrackDescriptor, base_prompt: str) -> str:
        """Return the enhanced prompt. May raise; callers treat failure as non-fatal."""
        ...


class CoverImageGenerator(Protocol):
    """Renders a prompt into an image file."""

    def is_configured(self) -> bool:
        """Whether image API credentials are present."""
        ...

    async def generate_cover_image(self, prompt: str, output_path: Path) -> None:
        """Write the generated image to *output_path*. Raises on failure."""
        ...
