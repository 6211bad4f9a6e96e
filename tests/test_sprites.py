from ebbgame.hardware import MAX_OAM, OamSprite
from ebbgame.sprites import (
    Direction,
    Entity,
    PreOam,
    SpriteDef,
    SpriteTile,
    oam_from_entity,
    oam_from_pre_oam,
    oam_from_sprite_def,
)


def _oam():
    return [OamSprite() for _ in range(MAX_OAM)]


def _sprite():
    return SpriteDef(
        tiles=(
            SpriteTile(0, 0, 1, palette=0),
            SpriteTile(8, 0, 2, palette=1, flip_x=True),
            SpriteTile(0xFF, 0xFF, 0xFF),
            SpriteTile(8, 8, 9),
        ),
        ppu_offset=0x10,
        p1=2,
        p2=3,
    )


def test_sprite_def_writes_tiles_until_terminator():
    oam = _oam()
    next_index = oam_from_sprite_def(_sprite(), oam, 4, 10, 20)
    assert next_index == 6
    assert oam[4] == OamSprite(tile=0x11, x=10, y=20, attributes=2)
    assert oam[5].tile == 0x12
    assert oam[5].x == 18
    assert oam[5].attributes & 3 == 3
    assert (oam[5].attributes & 0x40) == 0x40
    assert oam[6] == OamSprite()


def test_flip_y_sets_top_bit():
    sprite = SpriteDef(tiles=(SpriteTile(0, 0, 0, flip_y=True),))
    oam = _oam()
    oam_from_sprite_def(sprite, oam, 0, 0, 0)
    assert (oam[0].attributes & 0xC0) == 0x80


def test_positions_wrap_to_a_byte():
    sprite = SpriteDef(tiles=(SpriteTile(8, 0, 0),))
    oam = _oam()
    oam_from_sprite_def(sprite, oam, 0, 0xFC, 0)
    assert 0 <= oam[0].x <= 0xFF
    assert oam[0].x == 4


def test_entity_offset_combines_tile_and_sub_tile():
    oam = _oam()
    entity = Entity(5, 5, Direction.DOWN, _sprite(), real_x=3, real_y=-2)
    oam_from_entity(entity, oam, 4)
    assert oam[4].x == 83
    assert oam[4].y == 78


def test_entity_without_sprite_leaves_oam():
    oam = _oam()
    oam_from_entity(Entity(1, 1, Direction.UP, None), oam, 0)
    oam_from_entity(None, oam, 0)
    assert oam == _oam()


def test_pre_oam_skips_unused_and_moves_down_one_line():
    oam = _oam()
    entries = [PreOam(), None, PreOam(16, 4, 88, 87, _sprite())]
    oam_from_pre_oam(entries, oam)
    assert oam[4].x == 88
    assert oam[4].y == 88
    assert oam[0] == OamSprite()