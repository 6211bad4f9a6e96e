"""Emulated console hardware: palettes, controller state and sprite OAM."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pygame

Color = tuple[int, int, int, int]

MAX_OAM = 64
NES_COLOR_COUNT = 0x40
TRANSPARENT_ID = 0xFF
DEFAULT_TRANSPARENT: Color = (0, 0, 0, 0)
_PALETTE_FILE_LIMIT = 0xC0
_PALETTE_BYTES = 0x10


class Pad(enum.IntFlag):
    """Controller buttons as bits of the pad byte."""

    RIGHT = 0x01
    LEFT = 0x02
    DOWN = 0x04
    UP = 0x08
    START = 0x10
    SELECT = 0x20
    B = 0x40
    A = 0x80


_KEY_MAP = {
    pygame.K_RIGHT: Pad.RIGHT,
    pygame.K_LEFT: Pad.LEFT,
    pygame.K_DOWN: Pad.DOWN,
    pygame.K_UP: Pad.UP,
    pygame.K_RETURN: Pad.START,
    pygame.K_SPACE: Pad.SELECT,
    pygame.K_z: Pad.B,
    pygame.K_x: Pad.A,
}


@dataclass
class OamSprite:
    """One hardware sprite entry."""

    tile: int = 0
    x: int = 0
    y: int = 0
    attributes: int = 0


def _blank_palettes() -> list[list[int]]:
    return [[0] * 4 for _ in range(4)]


def _write_flat(target: list[list[int]], data: Sequence[int]) -> None:
    for offset, value in enumerate(data):
        target[offset // 4][offset % 4] = value & 0xFF


@dataclass
class PaletteState:
    """The master colour table plus the background and sprite palettes."""

    nes_colors: list[Color] = field(
        default_factory=lambda: [DEFAULT_TRANSPARENT] * NES_COLOR_COUNT
    )
    bg_palettes: list[list[int]] = field(default_factory=_blank_palettes)
    sprite_palettes: list[list[int]] = field(default_factory=_blank_palettes)

    def fix_sprite_palette(self) -> None:
        """Make colour 0 of every sprite palette transparent."""
        for palette in self.sprite_palettes:
            palette[0] = TRANSPARENT_ID

    def load_palette(self, which: int, data: Sequence[int]) -> None:
        """Load palette bytes: 0 background, 1 sprites, 2 both in one block."""
        data = list(data)
        if which == 0:
            self._check_size(data, _PALETTE_BYTES)
            _write_flat(self.bg_palettes, data)
        elif which == 1:
            self._check_size(data, _PALETTE_BYTES)
            _write_flat(self.sprite_palettes, data)
            self.fix_sprite_palette()
        elif which == 2:
            self._check_size(data, 2 * _PALETTE_BYTES)
            _write_flat(self.bg_palettes, data[:_PALETTE_BYTES])
            if len(data) > _PALETTE_BYTES:
                _write_flat(self.sprite_palettes, data[_PALETTE_BYTES:])
                self.fix_sprite_palette()
        else:
            raise ValueError(f"unknown palette target {which}")

    @staticmethod
    def _check_size(data: Sequence[int], limit: int) -> None:
        if len(data) > limit:
            raise ValueError(f"palette data holds {len(data)} bytes, limit is {limit}")

    def set_nes_colors(self, colors: Iterable[Color]) -> None:
        """Replace the start of the master colour table."""
        for index, color in enumerate(colors):
            if index >= NES_COLOR_COUNT:
                break
            self.nes_colors[index] = tuple(color)

    def color_from_id(self, color_id: int) -> Color:
        """Return the colour for a palette id; 0xFF is fully transparent."""
        if color_id == TRANSPARENT_ID:
            return DEFAULT_TRANSPARENT
        return self.nes_colors[color_id]

    def colors_for(self, ids: Iterable[int]) -> list[Color]:
        """Return the colours for a palette of ids."""
        return [self.color_from_id(color_id) for color_id in ids]


def read_nes_palette(path: str | Path) -> list[Color]:
    """Read up to 64 RGB triples from a .pal file."""
    with open(path, "rb") as handle:
        data = handle.read(_PALETTE_FILE_LIMIT)
    return [
        (data[i], data[i + 1], data[i + 2], 255)
        for i in range(0, len(data) - len(data) % 3, 3)
    ]


class Controller:
    """Held buttons and buttons newly pressed this frame."""

    def __init__(self) -> None:
        self.pad = 0
        self.pad_frame = 0
        self._previous = 0

    def key_down(self, pad: int) -> None:
        self.pad |= int(pad)

    def key_up(self, pad: int) -> None:
        self.pad &= ~int(pad) & 0xFF

    def end_frame(self) -> int:
        """Work out which buttons went down since the last frame."""
        self.pad_frame = (self.pad & ~self._previous) & 0xFF
        self._previous = self.pad
        return self.pad_frame

    def handle_key(self, key: int, pressed: bool) -> bool:
        """Apply a keyboard key; return True if it asks to quit."""
        if key == pygame.K_ESCAPE:
            return True
        button = _KEY_MAP.get(key)
        if button is not None:
            if pressed:
                self.key_down(button)
            else:
                self.key_up(button)
        return False


def draw_oam(
    target: pygame.Surface,
    oam: Iterable[OamSprite],
    sheets: Sequence[pygame.Surface | None],
    palettes: Sequence[Sequence[Color]],
) -> pygame.Surface:
    """Draw every OAM entry from the two sprite sheets onto target."""
    for sprite in oam:
        tile_x = sprite.tile % 0x10
        tile_y = sprite.tile // 0x10
        sheet = sheets[0]
        if tile_y >= 8:
            sheet = sheets[1]
            tile_y -= 8
        if sheet is None:
            continue
        rect = pygame.Rect(tile_x * 8, tile_y * 8, 8, 8)
        if not sheet.get_rect().contains(rect):
            continue
        tile = pygame.transform.flip(
            sheet.subsurface(rect),
            bool(sprite.attributes & 0x40),
            bool(sprite.attributes & 0x80),
        )
        colors = palettes[sprite.attributes & 3]
        if tile.get_bitsize() == 8:
            tile.set_palette([tuple(c[:3]) for c in colors])
            for index, color in enumerate(colors):
                if len(color) > 3 and color[3] == 0:
                    tile.set_colorkey(index)
                    break
        target.blit(tile, (sprite.x, sprite.y))
    return target