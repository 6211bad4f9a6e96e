import pygame

from ebbgame.tilemap import (
    TILE_COUNT,
    TILES_PER_ROW,
    TileWriter,
    Tilemap,
    draw_tilemap,
)


def test_write_and_clear():
    tm = Tilemap()
    tm.write(0xC8, 13, 12)
    assert tm.tiles[13 + 12 * TILES_PER_ROW] == 0xC8
    assert tm.tile_at(13, 12) == 0xC8
    tm.fill_attributes(0xAA)
    tm.clear()
    assert not any(tm.tiles)
    assert set(tm.attr) == {0xAA}


def test_write_past_nametable_lands_in_attributes():
    tm = Tilemap()
    tm.write(7, 0, 30)
    assert tm.attr[0] == 7
    assert tm.tile_at(0, 30) == 7
    assert len(tm.tiles) == TILE_COUNT


def test_uniform_attributes_give_one_palette():
    tm = Tilemap()
    tm.fill_attributes((2 << 6) | (2 << 4) | (2 << 2) | 2)
    assert {tm.palette_index(x, y) for x in range(32) for y in range(30)} == {2}


def test_palette_index_per_quadrant():
    tm = Tilemap()
    tm.attr[0] = 0b11100100
    assert [tm.palette_index(x, y) for (x, y) in [(0, 0), (1, 0), (0, 1), (1, 1)]] == [0, 1, 2, 3]


def test_writer_goto_moves_below_row():
    tm = Tilemap()
    writer = TileWriter(tm)
    writer.goto(13, 11)
    writer.add_tiles([0xC8, 0xC9])
    assert tm.tile_at(13, 12) == 0xC8
    assert tm.tile_at(14, 12) == 0xC9
    writer.newline()
    assert (writer.x, writer.y) == (13, 13)


def test_writer_wraps_at_row_end():
    tm = Tilemap()
    writer = TileWriter(tm)
    writer.goto(30, 0)
    writer.repeat_tile(0xCC, 3)
    assert tm.tile_at(30, 1) == 0xCC
    assert tm.tile_at(31, 1) == 0xCC
    assert tm.tile_at(0, 2) == 0xCC
    assert (writer.x, writer.y) == (1, 2)


def test_draw_tilemap_applies_cell_palette():
    sheet = pygame.Surface((128, 128), 0, 8)
    sheet.fill(1)
    palettes = [
        [(0, 0, 0, 255), (i * 40, 10, 20, 255), (0, 0, 0, 255), (0, 0, 0, 255)]
        for i in range(4)
    ]
    tm = Tilemap()
    tm.attr[0] = 3
    target = pygame.Surface((256, 256), 0, 32)
    draw_tilemap(sheet, tm, palettes, target)
    assert tuple(target.get_at((2, 2)))[:3] == tuple(palettes[3][1][:3])
    assert tuple(target.get_at((10, 2)))[:3] == tuple(palettes[0][1][:3])