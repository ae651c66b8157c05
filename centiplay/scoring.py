"""Score commands: fixed values and the spider's distance-based award."""

from __future__ import annotations

import math
from typing import Protocol

Position = tuple[float, float]


class ScoreBoard(Protocol):
    """Where awarded points go."""

    def add_score(self, points: int) -> None: ...


class SpiderScoreBoard(ScoreBoard, Protocol):
    """A score board that can also show the points awarded at a spot on screen."""

    def show_points(self, pos: Position, points: int) -> None: ...


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


class ScoreValue:
    """Award a fixed number of points."""

    def __init__(self, points: int) -> None:
        self.points = points

    def execute(self, board: ScoreBoard) -> int:
        """Add the points to ``board`` and return them."""
        board.add_score(self.points)
        return self.points


class ScoreByDistance:
    """Award more points the closer the spider was to the player.

    The near, medium and far ranges are the window height divided by the
    three given divisors.
    """

    def __init__(
        self,
        near_div: int,
        med_div: int,
        far_div: int,
        near_value: int,
        med_value: int,
        far_value: int,
        window_height: int,
    ) -> None:
        self.near = _trunc_div(window_height, near_div)
        self.med = _trunc_div(window_height, med_div)
        self.far = _trunc_div(window_height, far_div)
        self.near_value = near_value
        self.med_value = med_value
        self.far_value = far_value

    def points_for(self, spider_pos: Position, player_pos: Position) -> int:
        """Points for a spider killed at ``spider_pos`` with the player at ``player_pos``."""
        dx = spider_pos[0] - player_pos[0]
        dy = spider_pos[1] - player_pos[1]
        distance = math.sqrt(int(dx * dx + dy * dy))
        if distance <= self.near:
            return self.near_value
        if distance <= self.med:
            return self.med_value
        return self.far_value

    def execute(
        self, board: SpiderScoreBoard, spider_pos: Position, player_pos: Position
    ) -> int:
        """Show and add the award for this kill; return the points given."""
        points = self.points_for(spider_pos, player_pos)
        board.show_points(spider_pos, points)
        board.add_score(points)
        return points