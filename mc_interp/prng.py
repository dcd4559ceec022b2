"""Deterministic hash-based pseudo-randomness keyed by structured seeds."""
from __future__ import annotations

import hashlib
from typing import Sequence, TypeVar, Union

T = TypeVar("T")
SeedPart = Union[str, int, float]

_SEPARATOR = "\x1f"
_SCALE = float(1 << 64)


def _seed_key(*parts: SeedPart) -> str:
    """Join seed parts with a unit separator so ("ab", "c") != ("a", "bc")."""

    return _SEPARATOR.join(f"{type(part).__name__}:{part}" for part in parts)


def seeded_random(*parts: SeedPart) -> float:
    """Return a reproducible float in [0, 1) for the given seed parts."""

    digest = hashlib.sha256(_seed_key(*parts).encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big") / _SCALE


def prompt_id(prompt: str) -> str:
    """Stable short identifier for a prompt string."""

    normalized = " ".join(prompt.strip().lower().split())
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()[:16]


class SeededRandom:
    """Random draws keyed by (prompt id, purpose, index)."""

    def __init__(self, prompt: str) -> None:
        self.prompt_id = prompt_id(prompt)

    def random(self, purpose: str, index: int = 0) -> float:
        return seeded_random(self.prompt_id, purpose, index)

    def uniform(self, purpose: str, low: float, high: float, index: int = 0) -> float:
        return low + (high - low) * self.random(purpose, index)

    def randint(self, purpose: str, low: int, high: int, index: int = 0) -> int:
        """Integer in the inclusive range [low, high]."""

        if high < low:
            raise ValueError("high must be >= low")
        span = high - low + 1
        return low + min(span - 1, int(self.random(purpose, index) * span))

    def choice(self, purpose: str, options: Sequence[T], index: int = 0) -> T:
        if not options:
            raise ValueError("cannot choose from an empty sequence")
        return options[self.randint(purpose, 0, len(options) - 1, index)]


__all__ = ["SeedPart", "SeededRandom", "prompt_id", "seeded_random"]
