"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SamplingConfig(BaseModel):
    temperature: float = Field(ge=0.0, le=1.0)
    max_tokens: int = Field(gt=0)


class TextEnhancementConfig(BaseModel):
    model: str
    enhance: SamplingConfig
    viral: SamplingConfig
    spirit: SamplingConfig


class CoverConfig(BaseModel):
    output_dir: str
    web_prefix: str


class AppConfig(BaseModel):
    text: TextEnhancementConfig
    cover: CoverConfig
