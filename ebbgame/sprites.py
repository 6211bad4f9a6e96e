"""Sprite definitions, entities and their conversion to OAM entries."""

from __future__ import annotations

import enum
from collections.abc import Iterable, MutableSequence
from dataclasses import dataclass

from ebbgame.hardware import OamSprite

_END = 0xFF


class Direction(enum.Enum):
    DOWN = enum.auto()
    UP = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP_LEFT = enum.auto()
    UP_RIGHT = enum.auto()
    DOWN_LEFT = enum.auto()
    DOWN_RIGHT = enum.auto()
    IN_PLACE = enum.auto()


@dataclass(frozen=True)
class SpriteTile:
    """One 8x8 tile of a sprite, placed relative to the sprite origin."""

    x: int
    y: int
    index: int
    palette: int = 0
    flip_x: bool = False
    flip_y: bool = False
    order: bool = False

    @property
    def is_terminator(self) -> bool:
        return self.x == _END and self.y == _END and self.index == _END


@dataclass
class SpriteDef:
    """A sprite made of tiles, a tile offset into the sheet and two palettes."""

    tiles: tuple[SpriteTile, ...] = ()
    ppu_offset: int = 0
    p1: int = 0
    p2: int = 0


@dataclass
class Entity:
    """An object on the map: tile position plus sub-tile offset."""

    x: int
    y: int
    direction: Direction
    sprite: SpriteDef | None
    real_x: int = 0
    real_y: int = 0


@dataclass
class PreOam:
    """A sprite waiting to be written into OAM; tiles == 0 means unused."""

    tiles: int = 0
    start_index: int = 0
    x: int = 0
    y: int = 0
    sprite: SpriteDef | None = None


def oam_from_sprite_def(
    sprite: SpriteDef,
    oam: MutableSequence[OamSprite],
    start: int,
    x_off: int,
    y_off: int,
) -> int:
    """Write a sprite's tiles into OAM from start; return the next free index."""
    for tile in sprite.tiles:
        if tile.is_terminator:
            break
        if tile.palette == 0:
            use_palette = sprite.p1
        elif tile.palette == 1:
            use_palette = sprite.p2
        else:
            use_palette = 0
        attributes = (
            (int(tile.flip_y) << 7)
            | (int(tile.flip_x) << 6)
            | (int(tile.order) << 5)
            | use_palette
        )
        oam[start] = OamSprite(
            tile=(tile.index + sprite.ppu_offset) & 0xFF,
            x=(tile.x + x_off) & 0xFF,
            y=(tile.y + y_off) & 0xFF,
            attributes=attributes & 0xFF,
        )
        start = (start + 1) & 0xFF
    return start


def oam_from_entity(
    entity: Entity | None, oam: MutableSequence[OamSprite], start: int
) -> None:
    """Write an entity's sprite into OAM at its pixel position."""
    if entity is None or entity.sprite is None:
        return
    x_off = (entity.x * 16 + entity.real_x) & 0xFF
    y_off = (entity.y * 16 + entity.real_y) & 0xFF
    oam_from_sprite_def(entity.sprite, oam, start, x_off, y_off)


def oam_from_pre_oam(
    entries: Iterable[PreOam | None], oam: MutableSequence[OamSprite]
) -> None:
    """Write every used pending sprite into OAM, one line lower."""
    for entry in entries:
        if entry is None or entry.tiles == 0 or entry.sprite is None:
            continue
        oam_from_sprite_def(entry.sprite, oam, entry.start_index, entry.x, entry.y + 1)