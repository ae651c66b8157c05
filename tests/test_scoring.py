import pytest

from centiplay.scoring import ScoreByDistance, ScoreValue


class Board:
    def __init__(self):
        self.total = 0
        self.shown = []

    def add_score(self, points):
        self.total += points

    def show_points(self, pos, points):
        self.shown.append((pos, points))


@pytest.fixture
def spider_score():
    # ranges: near 120, medium 240, far 480
    return ScoreByDistance(4, 2, 1, 900, 600, 300, 480)


def test_score_value_adds_points():
    board = Board()
    cmd = ScoreValue(100)
    assert cmd.execute(board) == 100
    cmd.execute(board)
    assert board.total == 200


def test_ranges_from_window_height(spider_score):
    assert (spider_score.near, spider_score.med, spider_score.far) == (120, 240, 480)


@pytest.mark.parametrize(
    "spider, expected",
    [
        ((0, 0), 900),
        ((0, 120), 900),
        ((0, 121), 600),
        ((0, 240), 600),
        ((0, 241), 300),
        ((400, 400), 300),
    ],
)
def test_points_by_distance(spider_score, spider, expected):
    assert spider_score.points_for(spider, (0, 0)) == expected


def test_squared_distance_is_truncated(spider_score):
    # 120.001 squared is just over 14400 and truncates to it
    assert spider_score.points_for((120.001, 0), (0, 0)) == 900


def test_distance_is_symmetric(spider_score):
    a, b = (10, 50), (90, 230)
    assert spider_score.points_for(a, b) == spider_score.points_for(b, a)


def test_execute_shows_and_adds(spider_score):
    board = Board()
    pos = (0, 200)
    points = spider_score.execute(board, pos, (0, 0))
    assert points == 600
    assert board.total == 600
    assert board.shown == [(pos, 600)]


def test_zero_divisor_raises():
    with pytest.raises(ZeroDivisionError):
        ScoreByDistance(0, 2, 1, 900, 600, 300, 480)