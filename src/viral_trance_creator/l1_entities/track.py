"""Track descriptor entity, a read-only view of a track owned by the calling app."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Artist(BaseModel):
    name: str


class AudioFeatures(BaseModel):
    bpm: float | None = None
    energy: float | None = Field(default=None, ge=0.0, le=1.0)
    valence: float | None = Field(default=None, ge=0.0, le=1.0)


class TrackDescriptor(BaseModel):
    """Attributes of a track used to build cover prompts."""

    id: int
    title: str
    artist: Artist | None = None
    audio_features: AudioFeatures | None = None
    tags: list[str] = Field(default_factory=list)

    @property
    def artist_name(self) -> str | None:
        return self.artist.name if self.artist else None
