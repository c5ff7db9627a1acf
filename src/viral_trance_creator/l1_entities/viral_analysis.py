"""Viral analysis entity — structured social-media potential of a track."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Integral scores stay ints on the wire; fractional ones are kept as given.
Score = Annotated[int | float, Field(ge=0, le=100)]


class PlatformScores(BaseModel):
    tiktok: Score
    instagram: Score
    youtube: Score
    spotify: Score


class ViralAnalysis(BaseModel):
    """Scores and suggestions as returned by the analysis model (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    viral_score: Score
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    platforms: PlatformScores
    best_time_to_post: str = ''
    target_audience: list[str] = Field(default_factory=list)
    hashtag_suggestions: list[str] = Field(default_factory=list)


def default_viral_analysis() -> ViralAnalysis:
    """Fixed analysis used when the remote one is unavailable. Not derived from input."""
    return ViralAnalysis(
        viral_score=75,
        strengths=['Strong emotional impact', 'Good trance progression'],
        improvements=['Add more vocal hooks', 'Optimize for social media'],
        platforms=PlatformScores(tiktok=80, instagram=75, youtube=85, spotify=90),
        best_time_to_post='Friday 6-8 PM',
        target_audience=['Trance lovers', 'Festival goers'],
        hashtag_suggestions=['#trance', '#viral', '#uplifting'],
    )
