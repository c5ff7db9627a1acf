"""Pure functions for building image prompts from track attributes."""

from __future__ import annotations

from viral_trance_creator.l1_entities.cover_style import (
    COVER_STYLES,
    EMPTY_TEMPLATE,
    STYLE_TEMPLATES,
    CoverStyle,
)
from viral_trance_creator.l1_entities.track import TrackDescriptor

DEFAULT_ENERGY = 0.7
DEFAULT_VALENCE = 0.5
DEFAULT_BPM = 138.0
UNKNOWN_ARTIST = 'Unknown Artist'

_PROMPT_SUFFIX = (
    '3000x3000 resolution, professional music artwork, high quality, square format, modern electronic music design'
)


def build_cover_elements(track: TrackDescriptor, style: str) -> list[str]:
    """Base elements of *style* followed by energy, valence and bpm additions, in that order.

    Defaults apply only to missing features. An explicit 0 energy or bpm is
    used as given and lands in the low band rather than the default.
    """
    features = track.audio_features
    energy = _or_default(features.energy if features else None, DEFAULT_ENERGY)
    valence = _or_default(features.valence if features else None, DEFAULT_VALENCE)
    bpm = _or_default(features.bpm if features else None, DEFAULT_BPM)

    elements = list(STYLE_TEMPLATES.get(style, EMPTY_TEMPLATE).base_elements)

    if energy > 0.8:
        elements += ['dynamic motion blur', 'intense lighting']
    elif energy < 0.4:
        elements += ['soft gradients', 'peaceful atmosphere']

    if valence > 0.7:
        elements += ['uplifting rays', 'bright highlights']
    elif valence < 0.3:
        elements += ['deep shadows', 'moody lighting']

    if bpm >= 150:
        elements += ['high contrast', 'sharp edges']
    elif bpm <= 128:
        elements += ['smooth transitions', 'organic shapes']

    return elements


def build_cover_prompt(track: TrackDescriptor, style: str) -> str:
    """Build the deterministic base prompt for a cover. Unknown styles yield a degenerate prompt."""
    color_scheme = STYLE_TEMPLATES.get(style, EMPTY_TEMPLATE).color_scheme
    artist = track.artist_name or UNKNOWN_ARTIST
    elements = ', '.join(build_cover_elements(track, style))
    return f'Album cover for "{track.title}" by {artist}, {color_scheme}, {elements}, {_PROMPT_SUFFIX}'


def get_cover_styles() -> list[CoverStyle]:
    return [style.model_copy() for style in COVER_STYLES]


def _or_default(value: float | None, default: float) -> float:
    return default if value is None else value
