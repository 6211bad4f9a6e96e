# ebbgame

Building blocks for a small tile-based role-playing game on pygame, in the
style of an 8-bit console: a 64-colour master palette, 8×8 tile sheets, a
32-column background tilemap with attribute bytes, and a sprite attribute
table (OAM) of hardware-style sprites with flipping and per-sprite palettes.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Modules

### `ebbgame.hardware`

- `Pad` — controller buttons as bit flags (`RIGHT`, `LEFT`, `DOWN`, `UP`,
  `START`, `SELECT`, `B`, `A`).
- `OamSprite` — one sprite entry: `tile`, `x`, `y`, `attributes`.
- `PaletteState` — the master colour table (`nes_colors`) and four background
  and four sprite palettes of colour ids. `load_palette(which, data)` loads
  background (0), sprite (1) or both (2) palettes and raises `ValueError` for
  an unknown target or too much data; loading sprite palettes makes colour 0
  of each transparent (id `0xFF`). `color_from_id` and `colors_for` turn ids
  into RGBA colours; `set_nes_colors` replaces the start of the master table.
- `read_nes_palette(path)` — reads up to 64 RGB triples from a `.pal` file.
- `Controller` — tracks held buttons (`pad`) and buttons newly pressed this
  frame (`pad_frame`, computed by `end_frame`). `handle_key(key, pressed)`
  maps pygame keys and returns `True` for Escape:

  | Key        | Pad button |
  |------------|------------|
  | Arrow keys | D-pad      |
  | Enter      | Start      |
  | Space      | Select     |
  | X          | A          |
  | Z          | B          |

- `draw_oam(target, oam, sheets, palettes)` — draws each OAM entry from two
  sprite sheets (tile rows 8 and up come from the second), flipped by
  attribute bits `0x40`/`0x80`, using palette `attributes & 3`.

### `ebbgame.sprites`

`Direction`, `SpriteTile`, `SpriteDef`, `Entity` and `PreOam`, plus
`oam_from_sprite_def`, `oam_from_entity` and `oam_from_pre_oam`, which fill
an OAM list from them.

### `ebbgame.tilemap`

- `Tilemap` — 0x3C0 tile bytes and 0x40 attribute bytes; `write`, `clear`,
  `fill_attributes`, and `palette_index(x, y)` for the palette a cell uses.
- `TileWriter` — a cursor with `add_tile`, `add_tiles`, `repeat_tile`,
  `newline` and `goto`.
- `draw_tilemap(sheet, tilemap, palettes, target)` — renders the 32×32 cells.

### `ebbgame.saves`

`DoorArgs`, `Character` and `SaveSlot` hold save data; `default_party()`
returns the seven starting characters. `save_slot_tiles(name, slot, ...)`
and `naming_panel_tiles(...)` return grids of tile ids for a save-slot box
and the name-entry panel.

### `ebbgame.utils`

`resolve_path`, `monotonic_ms`, `rand_between`, `equal_colors`, and
`load_surface`, which raises `ImageLoadError` when an image cannot be loaded.

## What the package does not do

There is no game loop, window or command to start a game: the title
sequence, the interactive save-select and name-entry screens, and overworld
walking are not included. The package provides the data structures,
palette and input handling, and drawing functions such screens are built on.