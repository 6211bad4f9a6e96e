"""Save data, the starting party and the tile layouts of the save menus."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

from ebbgame.sprites import Direction, SpriteDef

Encoder = Callable[[str], Sequence[int]]
TileGrid = list[list[int]]

UIBOX_TL = 0xDB
UIBOX_T = 0xDC
UIBOX_TR = 0xDD
UIBOX_TC = 0xFE
UIBOX_L = 0xDE
UIBOX_R = 0xDF
UIBOX_BL = 0xFB
UIBOX_B = 0xFC
UIBOX_BR = 0xFD
RADIAL_EMPTY = 0x94
RADIAL_FILLED = 0x95

SAVE_SLOT_COUNT = 3
SAVE_SLOT_WIDTH = 24
SAVE_SLOT_HEIGHT = 4
NAMING_PANEL_WIDTH = 21
NAMING_PANEL_HEIGHT = 26
NAME_LENGTH = 7
PSI_COUNT = 64
STORY_FLAG_COUNT = 0x89 * 8
PARTY_SIZE = 7
DEFAULT_LEVEL = 99

LVL_TEMPLATE = "Lvl"
BLANK_SAVE_TEMPLATE = "Start up"
EXISTING_SAVE_TEMPLATE = " Continue  Copy Erase "
SAVE_BLANKER = "GAME(1)"
ALPHABET_CHART = (
    "ABCDEFG HIJKLMN\n"
    "OPQRSTU VWXYZ.'\n"
    "abcdefg hijklmn\n"
    "opqrstu vwxyz-:\n"
)
NAMING_QUESTION = "What is this\nboy's name?"
NAMING_FOOTER = "  \u25c6Back  \u25c6End\n   \u25c6Previous"

_NEWLINE = 0x0A
_NAME_TILE_OFFSET = 0x80


def byte_charmap(text: str) -> list[int]:
    """Map each character to the low byte of its code point."""
    return [ord(char) & 0xFF for char in text]


@dataclass
class DoorArgs:
    """Where a door leads: music, target position and facing."""

    music: int = 0
    target_x: int = 0
    direction: Direction = Direction.UP
    target_y: int = 0


def _default_breadcrumb() -> DoorArgs:
    return DoorArgs(music=0x12, target_x=0x21, direction=Direction.LEFT, target_y=0xBE)


@dataclass
class Character:
    """One party member's stats, equipment and known PSI."""

    unk1: int = 0
    status: int = 0
    unk2: int = 0
    max_hp: int = 0
    max_pp: int = 0
    offense: int = 0
    defense: int = 0
    fight: int = 0
    speed: int = 0
    wisdom: int = 0
    strength: int = 0
    force: int = 0
    level: int = 0
    exp: int = 0
    hp: int = 0
    pp: int = 0
    unk3: list[int] = field(default_factory=lambda: [0, 0, 8, 0x64])
    sprite: SpriteDef | None = None
    items: list[int] = field(default_factory=lambda: [0] * 8)
    weapon: int = 0
    coin: int = 0
    ring: int = 0
    pendant: int = 0
    breadcrumb: DoorArgs = field(default_factory=_default_breadcrumb)
    psi: list[bool] = field(default_factory=lambda: [False] * PSI_COUNT)
    name: str = ""


@dataclass
class SaveSlot:
    """Everything stored in one save file."""

    checksum: int = 0
    slot: int = 0
    slot_state: int = 0
    xpos_music: int = 0
    ypos_direction: int = 0
    party_members: list[int] = field(default_factory=lambda: [0] * 4)
    save_x: int = 0
    save_y: int = 0
    wallet_money: int = 0
    bank_money: int = 0
    dad_money: int = 0
    battle_message_speed: int = 0
    repel_counter: int = 0
    unk1: list[int] = field(default_factory=lambda: [0] * 4)
    flags: int = 0
    big_bag_uses: int = 0
    player_name: str = ""
    unk2: list[int] = field(default_factory=lambda: [0] * 11)
    save_ram_unk: list[int] = field(default_factory=lambda: [0] * 4)
    characters: list[Character] = field(
        default_factory=lambda: [Character() for _ in range(PARTY_SIZE)]
    )
    story_flags: list[bool] = field(default_factory=lambda: [False] * STORY_FLAG_COUNT)
    favorite_food: str = ""
    unk3: list[int] = field(default_factory=lambda: [0] * 0x1B)
    storage_items: list[int] = field(default_factory=lambda: [0] * 0x20)
    unk4: list[int] = field(default_factory=lambda: [0] * 0x30)


def _character(
    stats: Sequence[int],
    *,
    psi: Iterable[int] = (),
    name: str = "",
    unk3: Sequence[int] = (0, 0, 8, 0x64),
    first_item: int = 0,
) -> Character:
    (max_hp, max_pp, offense, defense, fight, speed, wisdom, strength,
     force, level, exp, hp, pp) = stats
    known = [False] * PSI_COUNT
    for index in psi:
        known[index] = True
    items = [0] * 8
    items[0] = first_item
    return Character(
        max_hp=max_hp, max_pp=max_pp, offense=offense, defense=defense,
        fight=fight, speed=speed, wisdom=wisdom, strength=strength,
        force=force, level=level, exp=exp, hp=hp, pp=pp,
        unk3=list(unk3), items=items, psi=known, name=name,
    )


def default_party() -> list[Character]:
    """The seven characters as they start a new game."""
    return [
        _character((30, 8, 5, 5, 5, 5, 5, 5, 5, 1, 0, 30, 8), psi=(1,), first_item=0x6E),
        _character((26, 12, 1, 3, 1, 3, 7, 3, 8, 1, 0, 26, 12), psi=(1, 9)),
        _character((28, 0, 4, 2, 4, 2, 8, 4, 3, 1, 0, 28, 0)),
        _character((134, 0, 86, 86, 86, 86, 19, 57, 38, 18, 3600, 134, 0)),
        _character((32, 0, 9, 9, 9, 9, 2, 6, 4, 1, 0, 32, 0), name="Pippi  "),
        _character(
            (999, 0, 999, 999, 255, 255, 255, 255, 255, 99, 1000000, 999, 0),
            name="EVE    ",
            unk3=(0, 0, 8, 0x3A),
        ),
        _character(
            (50, 0, 30, 30, 30, 30, 30, 30, 30, 99, 1000000, 30, 0),
            name="FlynMan",
        ),
    ]


class _Canvas:
    """A grid of tile ids; writes outside it are clipped."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"block size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.rows: TileGrid = [[0] * width for _ in range(height)]

    def put(self, tile: int, x: int, y: int) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self.rows[y][x] = tile & 0xFF

    def run(self, codes: Iterable[int], x: int, y: int, offset: int = 0) -> int:
        """Write codes up to the first zero; return the column after them."""
        for code in codes:
            if code == 0:
                break
            self.put(code + offset, x, y)
            x += 1
        return x

    def fill_to(self, tile: int, x: int, end: int, y: int) -> int:
        while x < end:
            self.put(tile, x, y)
            x += 1
        return x

    def text(self, codes: Iterable[int], x: int, y: int) -> None:
        """Write codes with newlines going two rows down to the start column."""
        origin = x
        for code in codes:
            if code == 0:
                break
            if code == _NEWLINE:
                x = origin
                y += 2
            else:
                self.put(code, x, y)
                x += 1


def _strip_terminated(codes: Sequence[int]) -> list[int]:
    result = []
    for code in codes:
        if code == 0:
            break
        result.append(code)
    return result


def save_slot_tiles(
    name: str,
    slot: int,
    width: int = SAVE_SLOT_WIDTH,
    level: int = DEFAULT_LEVEL,
    encode: Encoder = byte_charmap,
) -> TileGrid:
    """Tile ids for one save-slot box, four rows of the given width."""
    canvas = _Canvas(width, SAVE_SLOT_HEIGHT)
    last = width - 1
    canvas.put(UIBOX_TL, 0, 0)
    canvas.put(UIBOX_T, 1, 0)
    canvas.put(UIBOX_TC, 2, 0)
    x = 3

    name_codes = _strip_terminated(encode(name))
    if name_codes:
        x = canvas.run(name_codes, x, 0, _NAME_TILE_OFFSET)
        x = canvas.fill_to(0, x, 3 + 8, 0)
        x = canvas.run((ord(c) for c in LVL_TEMPLATE), x, 0, _NAME_TILE_OFFSET)
        x = canvas.run(encode(str(level & 0xFF)[:2]), x, 0)
        x = canvas.fill_to(UIBOX_T, x, last, 0)
        canvas.put(UIBOX_TR, x, 0)

        canvas.put(UIBOX_L, 0, 1)
        canvas.put(UIBOX_R, last, 1)

        canvas.put(UIBOX_L, 0, 2)
        x = canvas.run(encode(EXISTING_SAVE_TEMPLATE), 1, 2)
        x = canvas.fill_to(0, x, last, 2)
        canvas.put(UIBOX_R, x, 2)
    else:
        label = SAVE_BLANKER[:5] + str(slot + 1)[0] + SAVE_BLANKER[6:]
        x = canvas.run(encode(label), x, 0)
        x = canvas.fill_to(UIBOX_T, x, last, 0)
        canvas.put(UIBOX_TR, x, 0)

        canvas.put(UIBOX_L, 0, 1)
        canvas.put(UIBOX_R, last, 1)

        canvas.put(UIBOX_L, 0, 2)
        x = canvas.fill_to(0, 1, 7, 2)
        x = canvas.run(encode(BLANK_SAVE_TEMPLATE), x, 2)
        x = canvas.fill_to(0, x, last, 2)
        canvas.put(UIBOX_R, x, 2)

    canvas.put(UIBOX_BL, 0, 3)
    x = canvas.fill_to(UIBOX_B, 1, last, 3)
    canvas.put(UIBOX_BR, x, 3)
    return canvas.rows


def naming_panel_tiles(
    width: int = NAMING_PANEL_WIDTH, encode: Encoder = byte_charmap
) -> TileGrid:
    """Tile ids for the name-entry screen: question box, answer box and letters."""
    canvas = _Canvas(width, NAMING_PANEL_HEIGHT)

    inner_end = width - 3
    canvas.put(UIBOX_TL, 2, 0)
    x = canvas.fill_to(UIBOX_T, 3, inner_end, 0)
    canvas.put(UIBOX_TR, x, 0)
    y = 1
    for _ in range(5):
        canvas.put(UIBOX_L, 2, y)
        x = canvas.fill_to(0, 3, inner_end, y)
        canvas.put(UIBOX_R, x, y)
        y += 1
    canvas.put(UIBOX_BL, 2, y)
    x = canvas.fill_to(UIBOX_B, 3, inner_end, y)
    canvas.put(UIBOX_BR, x, y)

    canvas.put(UIBOX_TL, 0, y)
    canvas.put(UIBOX_T, 1, y)
    canvas.put(UIBOX_T, width - 2, y)
    canvas.put(UIBOX_TR, width - 1, y)
    y += 1
    for _ in range(17):
        canvas.put(UIBOX_L, 0, y)
        x = canvas.fill_to(0, 1, width - 1, y)
        canvas.put(UIBOX_R, x, y)
        y += 1
    canvas.put(UIBOX_BL, 0, y)
    x = canvas.fill_to(UIBOX_B, 1, width - 1, y)
    canvas.put(UIBOX_BR, x, y)

    canvas.text(encode(NAMING_QUESTION), 4, 2)
    canvas.text(encode(ALPHABET_CHART + NAMING_FOOTER), 3, 12)
    return canvas.rows