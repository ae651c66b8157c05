import pytest

from centiplay.text import (
    DEFAULT_CELL,
    LIFE_CELL,
    LIFE_SYMBOL,
    SPACE_CELL,
    STAR_CELL,
    Glyph,
    Letter,
    char_to_index,
    format_score,
    life_string,
    text_to_indices,
)


def test_letter_cells():
    assert char_to_index("A") == 17
    assert char_to_index("Z") == char_to_index("A") + 25


def test_lowercase_matches_uppercase():
    for lower, upper in zip("abcxyz", "ABCXYZ"):
        assert char_to_index(lower) == char_to_index(upper)


def test_digit_cells():
    assert [char_to_index(d) for d in "0123456789"] == list(range(10))


def test_special_cells():
    assert char_to_index(" ") == SPACE_CELL == 13
    assert char_to_index("{") == LIFE_CELL == 43
    assert char_to_index("*") == STAR_CELL == 44
    assert char_to_index("?") == DEFAULT_CELL == 10


def test_char_to_index_rejects_strings():
    with pytest.raises(ValueError):
        char_to_index("AB")


def test_text_to_indices_matches_per_char():
    text = "Hi 9*"
    assert text_to_indices(text) == [char_to_index(c) for c in text]


@pytest.mark.parametrize("score", [0, 7, 42, 999, 1234])
def test_format_score_pads_to_four(score):
    shown = format_score(score)
    assert len(shown) == 4
    assert int(shown) == score


def test_format_score_worked_example():
    assert format_score(5) == "0005"


def test_format_score_long_unpadded():
    assert format_score(123456) == "123456"


@pytest.mark.parametrize("lives", [1, 2, 3, 5])
def test_life_string_player_one_omits_ship_in_play(lives):
    shown = life_string(lives, False)
    assert set(shown) <= {LIFE_SYMBOL}
    assert len(shown) == lives - 1


@pytest.mark.parametrize("lives", [1, 2, 3, 5])
def test_life_string_player_two_counts_every_life(lives):
    assert len(life_string(lives, True)) == lives


def test_life_string_never_negative():
    assert life_string(0, False) == ""


class _Sheet:
    def __init__(self):
        self.drawn = []

    def draw(self, cell_index, position):
        self.drawn.append((cell_index, position))

    def sprite(self, cell_index):
        return ("sprite", cell_index)


def test_glyph_draws_its_cell():
    sheet = _Sheet()
    Glyph(sheet, 12, (3.0, 4.0)).draw()
    assert sheet.drawn == [(12, (3.0, 4.0))]


def test_glyph_sprite_from_sheet():
    assert Glyph(_Sheet(), 1, (0.0, 0.0)).sprite(9) == ("sprite", 9)


def test_glyph_without_sheet_fails():
    with pytest.raises(RuntimeError):
        Glyph().draw()


def test_letter_is_not_mushroom():
    letter = Letter((8.0, 16.0))
    assert letter.is_mushroom() is False
    assert letter.position == (8.0, 16.0)