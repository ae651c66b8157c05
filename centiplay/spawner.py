"""Timed spawning of scorpions, spiders, fleas and whole centipedes."""

from __future__ import annotations

import random
from typing import Any, Optional, Protocol

Position = tuple[float, float]

SCORPION_ALARM = 1
SPIDER_ALARM = 2
FLEA_ALARM = 3
SCORPION_REARM_ALARM = 4
"""Slot the scorpion timer re-arms on; no handler answers it."""

SCORPION_Y = 200.0
SPIDER_Y = 400.0
FLEA_COLUMNS = 31
FLEA_COLUMN_WIDTH = 16


class Waves(Protocol):
    def centipede_died(self) -> None: ...


class World(Protocol):
    """Factories and field queries the spawner relies on."""

    window_width: float
    head_height: float

    def mushroom_count(self) -> int: ...

    def create_scorpion(self, pos: Position, direction: int, speed: int, spawner: Any) -> Any: ...

    def create_spider(self, pos: Position, speed: int, spawner: Any) -> Any: ...

    def create_flea(self, pos: Position, spawner: Any) -> Any: ...

    def create_segment(self, pos: Position, speed: int, prev: Any, spawner: Any) -> Any: ...

    def create_head(self, pos: Position, speed: int, prev: Any, spawner: Any, in_zone: bool) -> Any: ...


class CritterSpawner:
    """Keeps one of each critter alive on a timer and tracks the live centipede heads.

    Timers are kept in ``alarms`` as seconds keyed by alarm slot; the game
    loop counts them down and calls the matching ``*_alarm`` method.
    """

    def __init__(self, waves: Waves, world: World, rng: Optional[random.Random] = None) -> None:
        self.waves = waves
        self.world = world
        self.rng = rng if rng is not None else random.Random()
        self.alarms: dict[int, float] = {}
        self.heads: list[Any] = []
        self.head_count = 0

        self.scorpion_here = False
        self.scorpion: Any = None
        self.scorpion_speed = 0
        self.min_scorpion = 0
        self.max_scorpion = 0

        self.spider_here = False
        self.spider: Any = None
        self.spider_speed = 0
        self.min_spider = 0
        self.max_spider = 0

        self.flea_here = False
        self.flea: Any = None
        self.mushroom_threshold = 0
        self.min_flea = 0
        self.max_flea = 0

    def _delay(self, min_time: int, max_time: int) -> float:
        span = max_time - min_time
        if span <= 0:
            raise ValueError(f"max time {max_time} must exceed min time {min_time}")
        return float(min_time + self.rng.randrange(span))

    def spawn_scorpion(self, min_time: int, max_time: int, speed: int) -> None:
        """Start the scorpion timer."""
        self.scorpion_speed = speed
        self.min_scorpion = min_time
        self.max_scorpion = max_time
        self.alarms[SCORPION_ALARM] = self._delay(min_time, max_time)

    def spawn_spider(self, min_time: int, max_time: int, speed: int) -> None:
        """Start the spider timer."""
        self.spider_speed = speed
        self.min_spider = min_time
        self.max_spider = max_time
        self.alarms[SPIDER_ALARM] = self._delay(min_time, max_time)

    def spawn_flea(self, min_time: int, max_time: int, threshold: int) -> None:
        """Start the flea timer; fleas come while mushrooms number below ``threshold``."""
        self.mushroom_threshold = threshold
        self.min_flea = min_time
        self.max_flea = max_time
        self.alarms[FLEA_ALARM] = self._delay(min_time, max_time)

    def spawn_centipede(self, length: int, speed: int) -> Any:
        """Create a head followed by ``length - 1`` segments and return the head."""
        if length < 1:
            raise ValueError(f"centipede length must be at least 1, got {length}")
        pos = (self.world.window_width / 2, float(self.world.head_height))
        tail = None
        for _ in range(length - 1):
            tail = self.world.create_segment(pos, speed, tail, self)
        head = self.world.create_head(pos, speed, tail, self, False)
        self.heads.append(head)
        self.head_count += 1
        return head

    def scorpion_alarm(self) -> None:
        """Send in a scorpion from a random side if none is present."""
        if not self.scorpion_here:
            from_left = self.rng.randrange(2) == 0
            self.scorpion_here = True
            if from_left:
                self.scorpion = self.world.create_scorpion(
                    (0.0, SCORPION_Y), -1, self.scorpion_speed, self
                )
            else:
                self.scorpion = self.world.create_scorpion(
                    (self.world.window_width, SCORPION_Y), 1, self.scorpion_speed, self
                )
        self.alarms[SCORPION_REARM_ALARM] = self._delay(self.min_scorpion, self.max_scorpion)

    def spider_alarm(self) -> None:
        """Send in a spider from a random side if none is present."""
        if not self.spider_here:
            self.spider_here = True
            if self.rng.randrange(2) == 0:
                self.spider = self.world.create_spider(
                    (0.0, SPIDER_Y), -self.spider_speed, self
                )
            else:
                self.spider = self.world.create_spider(
                    (self.world.window_width, SPIDER_Y), self.spider_speed, self
                )
        self.alarms[SPIDER_ALARM] = self._delay(self.min_spider, self.max_spider)

    def flea_alarm(self) -> None:
        """Drop a flea in a random column when the field is short of mushrooms."""
        if not self.flea_here and self.world.mushroom_count() < self.mushroom_threshold:
            self.flea_here = True
            column = 1 + self.rng.randrange(FLEA_COLUMNS)
            self.flea = self.world.create_flea((float(column * FLEA_COLUMN_WIDTH), 0.0), self)
        self.alarms[FLEA_ALARM] = self._delay(self.min_flea, self.max_flea)

    def scorpion_squashed(self) -> None:
        self.scorpion_here = False

    def flea_squashed(self) -> None:
        self.flea_here = False

    def spider_squashed(self) -> None:
        self.spider_here = False

    def segment_squashed(self, new_head: Any) -> None:
        """Track a head created by the centipede splitting."""
        self.heads.append(new_head)
        self.head_count += 1

    def head_squashed(self, old_head: Any) -> None:
        """Forget a killed head; the last one ends the centipede."""
        self.heads = [head for head in self.heads if head is not old_head]
        self.head_count -= 1
        if self.head_count == 0:
            self.waves.centipede_died()

    def new_wave(self) -> None:
        """Clear every critter and centipede and stop the spawn timers."""
        if self.flea_here:
            self.flea_here = False
            self.flea.squash()
        if self.scorpion_here:
            self.scorpion_here = False
            self.scorpion.squash()
        if self.spider_here:
            self.spider_here = False
            self.spider.squash()
        for _ in range(self.head_count):
            if not self.heads:
                break
            self.heads.pop().squash()
        self.head_count = 0
        for slot in (SCORPION_ALARM, SPIDER_ALARM, FLEA_ALARM):
            self.alarms.pop(slot, None)

    def pause_critters(self) -> None:
        """Freeze every centipede and critter in place."""
        for head in self.heads:
            head.pause()
        if self.flea_here:
            self.flea.pause()
        if self.scorpion_here:
            self.scorpion.pause()
        if self.spider_here:
            self.spider.pause()