"""Sprite-font lookups, HUD number formatting, glyphs and field letters."""

from __future__ import annotations

from typing import Any, Optional, Protocol

Position = tuple[float, float]

LETTER_BASE = 17
"""Cell of 'A' on the font sheet; the other letters follow it."""
SPACE_CELL = 13
LIFE_CELL = 43
STAR_CELL = 44
DEFAULT_CELL = 10
"""Cell drawn for any character the font has no symbol for."""

LIFE_SYMBOL = "{"
"""Character the font draws as one spare-life marker."""

SCORE_WIDTH = 4
"""Scores are padded with leading zeros to at least this many characters."""


def char_to_index(char: str) -> int:
    """Cell index on the font sheet for one character."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if "a" <= char <= "z":
        char = char.upper()
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + LETTER_BASE
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if char == " ":
        return SPACE_CELL
    if char == LIFE_SYMBOL:
        return LIFE_CELL
    if char == "*":
        return STAR_CELL
    return DEFAULT_CELL


def text_to_indices(text: str) -> list[int]:
    """Font cell indices for every character of ``text``."""
    return [char_to_index(char) for char in text]


def format_score(score: int) -> str:
    """A score as shown on the HUD: padded with leading zeros to four characters."""
    digits = str(score)
    return "0" * (SCORE_WIDTH - len(digits)) + digits


def life_string(lives: int, player_two: bool) -> str:
    """Spare-life markers for the HUD.

    Player one shows one marker fewer than its lives (the ship in play is
    not counted); player two shows one for every life.
    """
    count = lives if player_two else lives - 1
    return LIFE_SYMBOL * max(count, 0)


class SpriteSheet(Protocol):
    """A grid of cells that can be drawn or cut out as sprites."""

    def draw(self, cell_index: int, position: Position) -> None: ...

    def sprite(self, cell_index: int) -> Any: ...


class Glyph:
    """One cell of a sprite sheet placed at a fixed position."""

    def __init__(
        self,
        sheet: Optional[SpriteSheet] = None,
        cell_index: int = 0,
        position: Position = (0.0, 0.0),
    ) -> None:
        self.sheet = sheet
        self.cell_index = cell_index
        self.position = position

    def _require_sheet(self) -> SpriteSheet:
        if self.sheet is None:
            raise RuntimeError("glyph has no sprite sheet")
        return self.sheet

    def draw(self) -> None:
        """Draw this glyph's cell at its position."""
        self._require_sheet().draw(self.cell_index, self.position)

    def sprite(self, cell_index: int) -> Any:
        """The sheet's sprite for ``cell_index``."""
        return self._require_sheet().sprite(cell_index)


class Letter:
    """A text character sitting in the mushroom field; blocks like a mushroom."""

    def __init__(self, position: Position = (0.0, 0.0)) -> None:
        self.position = position

    def is_mushroom(self) -> bool:
        return False