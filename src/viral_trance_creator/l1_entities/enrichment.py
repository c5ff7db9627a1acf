"""Enrichment result: either the model output or the fallback it degraded to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class Enrichment(Generic[T]):
    """Outcome of a best-effort enrichment call.

    ``value`` is always usable. When ``fallback`` is set it holds the
    degraded default (the caller's input or a fixed value) and ``error``
    describes why the remote result was discarded.
    """

    value: T
    fallback: bool = False
    error: str = ''

    @property
    def ok(self) -> bool:
        return not self.fallback

    @classmethod
    def degraded(cls, value: T, error: str) -> Enrichment[T]:
        return cls(value=value, fallback=True, error=error)
