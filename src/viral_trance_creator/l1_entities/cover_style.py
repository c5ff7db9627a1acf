"""Cover style catalog and the visual template behind each style id."""

from __future__ import annotations

from pydantic import BaseModel


class CoverStyle(BaseModel):
    id: str
    name: str
    description: str


class CoverStyleTemplate(BaseModel):
    """Visual vocabulary for a style: a color scheme and base prompt elements."""

    color_scheme: str
    base_elements: tuple[str, ...]


COVER_STYLES: tuple[CoverStyle, ...] = (
    CoverStyle(
        id='neon',
        name='Neon',
        description='Vibrant purple/blue geometric patterns with cyberpunk aesthetic',
    ),
    CoverStyle(
        id='ethereal',
        name='Ethereal',
        description='Soft auroras, Jerusalem themes, celestial atmosphere with gold accents',
    ),
)

STYLE_TEMPLATES: dict[str, CoverStyleTemplate] = {
    'neon': CoverStyleTemplate(
        color_scheme='vibrant neon purple and electric blue gradient',
        base_elements=(
            'geometric patterns',
            'digital grid overlay',
            'glowing edges',
            'cyberpunk aesthetic',
            '3D elements',
        ),
    ),
    'ethereal': CoverStyleTemplate(
        color_scheme='soft aurora colors, heavenly light',
        base_elements=(
            'flowing light streams',
            'celestial atmosphere',
            'gold accents',
            'divine radiance',
            'Jerusalem skyline silhouette',
        ),
    ),
}

# Unknown style ids render with no color scheme and no base elements.
EMPTY_TEMPLATE = CoverStyleTemplate(color_scheme='', base_elements=())
