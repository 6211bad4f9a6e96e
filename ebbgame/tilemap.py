"""Background tilemap: tile writes, attribute lookups and drawing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

import pygame

TILES_PER_ROW = 0x20
TILE_COUNT = 0x3C0
ATTR_COUNT = 0x40
TILE_SIZE = 8

Color = tuple[int, int, int, int]


@dataclass
class Tilemap:
    """A 32-column nametable followed directly by its attribute bytes."""

    tiles: bytearray = field(default_factory=lambda: bytearray(TILE_COUNT))
    attr: bytearray = field(default_factory=lambda: bytearray(ATTR_COUNT))

    def clear(self) -> None:
        """Zero every tile; attributes are kept."""
        self.tiles[:] = bytes(TILE_COUNT)

    def _offset(self, x: int, y: int) -> int:
        return x + y * TILES_PER_ROW

    def write(self, tile: int, x: int, y: int) -> None:
        """Put a tile at (x, y); rows past the nametable land in the attributes."""
        offset = self._offset(x, y)
        if offset < TILE_COUNT:
            self.tiles[offset] = tile & 0xFF
        else:
            self.attr[offset - TILE_COUNT] = tile & 0xFF

    def tile_at(self, x: int, y: int) -> int:
        offset = self._offset(x, y)
        if offset < TILE_COUNT:
            return self.tiles[offset]
        return self.attr[offset - TILE_COUNT]

    def palette_index(self, x: int, y: int) -> int:
        """The background palette (0-3) used by the tile at (x, y)."""
        attr_x, attr_y = x // 2, y // 2
        value = self.attr[attr_x + attr_y * 2]
        bit = (x - attr_x * 2) + (y - attr_y * 2) * 2
        return (value >> (bit * 2)) & 3

    def fill_attributes(self, value: int) -> None:
        self.attr[:] = bytes([value & 0xFF]) * ATTR_COUNT


class TileWriter:
    """A cursor that writes runs of tiles into a tilemap."""

    def __init__(self, tilemap: Tilemap) -> None:
        self.tilemap = tilemap
        self.x = 0
        self.y = 0
        self.origin_x = 0
        self.origin_y = 0

    def add_tile(self, tile: int) -> None:
        self.tilemap.write(tile, self.x, self.y)
        self.x += 1
        if self.x >= TILES_PER_ROW:
            self.x = 0
            self.y += 1

    def add_tiles(self, tiles: Iterable[int]) -> None:
        for tile in tiles:
            self.add_tile(tile)

    def repeat_tile(self, tile: int, count: int) -> None:
        for _ in range(count):
            self.add_tile(tile)

    def newline(self) -> None:
        self.y += 1
        self.x = self.origin_x

    def goto(self, x: int, y: int) -> None:
        """Move to column x on the row below y and remember it as the origin."""
        self.x = self.origin_x = x
        self.y = self.origin_y = y + 1


def draw_tilemap(
    sheet: pygame.Surface,
    tilemap: Tilemap,
    palettes: Sequence[Sequence[Color]],
    target: pygame.Surface,
) -> pygame.Surface:
    """Render all 32x32 cells of the tilemap from an indexed sheet onto target."""
    tinted = []
    for colors in palettes:
        copy = sheet.copy()
        if copy.get_bitsize() == 8:
            copy.set_palette([tuple(c[:3]) for c in colors])
        tinted.append(copy)

    for y in range(TILES_PER_ROW):
        for x in range(TILES_PER_ROW):
            value = tilemap.tile_at(x, y)
            source = tinted[tilemap.palette_index(x, y)]
            area = pygame.Rect(
                (value % 0x10) * TILE_SIZE, (value // 0x10) * TILE_SIZE,
                TILE_SIZE, TILE_SIZE,
            )
            target.blit(source, (x * TILE_SIZE, y * TILE_SIZE), area)
    return target