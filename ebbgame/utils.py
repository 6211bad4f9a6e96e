"""Small helpers: paths, time, random numbers, colours and image loading."""

from __future__ import annotations

import random
import time
from collections.abc import Sequence

import pygame

_PATH_LIMIT = 255


class ImageLoadError(OSError):
    """An image file could not be loaded."""


def resolve_path(template: str, basepath: str) -> str:
    """Fill the %s in a path template with the base path."""
    return (template % basepath)[:_PATH_LIMIT]


def monotonic_ms() -> int:
    """Milliseconds from a monotonic clock."""
    return time.monotonic_ns() // 1_000_000


def rand_between(low: int, high: int, rng: random.Random | None = None) -> int:
    """Return low plus a random value in 0..high."""
    source = rng if rng is not None else random
    return source.randrange(high + 1) + low


def equal_colors(first: Sequence[int], second: Sequence[int]) -> bool:
    """Compare two RGBA colours component by component."""
    return tuple(first)[:4] == tuple(second)[:4]


def load_surface(path: str) -> pygame.Surface:
    """Load an image file into a surface."""
    try:
        return pygame.image.load(path)
    except (pygame.error, OSError) as exc:
        raise ImageLoadError(f"Unable to load image {path}: {exc}") from exc