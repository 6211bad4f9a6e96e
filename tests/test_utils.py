import random

import pygame
import pytest

from ebbgame.utils import (
    ImageLoadError,
    equal_colors,
    load_surface,
    monotonic_ms,
    rand_between,
    resolve_path,
)


def test_resolve_path_fills_base():
    assert resolve_path("%simage/ui.png", "/game/") == "/game/image/ui.png"


def test_resolve_path_truncates_long_paths():
    result = resolve_path("%spalettes/nes.pal", "x" * 400)
    assert len(result) == 255
    assert set(result) == {"x"}


def test_monotonic_ms_never_goes_back():
    first = monotonic_ms()
    second = monotonic_ms()
    assert second >= first


def test_rand_between_stays_in_range():
    rng = random.Random(42)
    values = [rand_between(3, 5, rng) for _ in range(500)]
    assert min(values) >= 3
    assert max(values) <= 8
    assert len(set(values)) > 1


def test_rand_between_is_repeatable_with_seed():
    first = [rand_between(0, 10, random.Random(7)) for _ in range(3)]
    second = [rand_between(0, 10, random.Random(7)) for _ in range(3)]
    assert first == second


def test_equal_colors():
    assert equal_colors((1, 2, 3, 4), (1, 2, 3, 4))
    assert not equal_colors((1, 2, 3, 4), (1, 2, 3, 5))
    assert equal_colors(pygame.Color(9, 8, 7, 255), (9, 8, 7, 255))


def test_load_surface_round_trip(tmp_path):
    path = tmp_path / "tile.bmp"
    surface = pygame.Surface((16, 24), 0, 32)
    surface.fill((200, 10, 20))
    pygame.image.save(surface, str(path))
    loaded = load_surface(str(path))
    assert loaded.get_size() == (16, 24)
    assert tuple(loaded.get_at((3, 3)))[:3] == (200, 10, 20)


def test_load_surface_missing_file(tmp_path):
    with pytest.raises(ImageLoadError):
        load_surface(str(tmp_path / "nothing.png"))