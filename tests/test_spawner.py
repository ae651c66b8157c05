from collections import deque

import pytest

from centiplay.spawner import (
    FLEA_ALARM,
    SCORPION_ALARM,
    SCORPION_REARM_ALARM,
    SPIDER_ALARM,
    CritterSpawner,
)


class ScriptedRng:
    def __init__(self, *values):
        self.values = deque(values)

    def randrange(self, n):
        value = self.values.popleft()
        assert 0 <= value < n
        return value


class Critter:
    def __init__(self, kind, *args):
        self.kind = kind
        self.args = args
        self.squashed = 0
        self.paused = 0

    def squash(self):
        self.squashed += 1

    def pause(self):
        self.paused += 1


class FakeWorld:
    window_width = 480.0
    head_height = 16.0

    def __init__(self, mushrooms=0):
        self.mushrooms = mushrooms
        self.created = []

    def mushroom_count(self):
        return self.mushrooms

    def _make(self, kind, *args):
        critter = Critter(kind, *args)
        self.created.append(critter)
        return critter

    def create_scorpion(self, pos, direction, speed, spawner):
        return self._make("scorpion", pos, direction, speed)

    def create_spider(self, pos, speed, spawner):
        return self._make("spider", pos, speed)

    def create_flea(self, pos, spawner):
        return self._make("flea", pos)

    def create_segment(self, pos, speed, prev, spawner):
        return self._make("segment", pos, speed, prev)

    def create_head(self, pos, speed, prev, spawner, in_zone):
        return self._make("head", pos, speed, prev, in_zone)


class FakeWaves:
    def __init__(self):
        self.deaths = 0

    def centipede_died(self):
        self.deaths += 1


def make_spawner(*rolls, mushrooms=0):
    waves = FakeWaves()
    world = FakeWorld(mushrooms)
    return CritterSpawner(waves, world, ScriptedRng(*rolls)), world, waves


def test_spawn_scorpion_schedules_alarm():
    spawner, _, _ = make_spawner(2)
    spawner.spawn_scorpion(5, 10, 3)
    assert spawner.alarms[SCORPION_ALARM] == 7.0


def test_scorpion_from_left_then_rearms_elsewhere():
    spawner, world, _ = make_spawner(0, 0, 0, 1)
    spawner.spawn_scorpion(5, 10, 3)
    spawner.scorpion_alarm()
    assert spawner.scorpion_here is True
    assert world.created[0].args == ((0.0, 200.0), -1, 3)
    assert spawner.alarms[SCORPION_REARM_ALARM] == 5.0
    spawner.scorpion_alarm()
    assert len(world.created) == 1


def test_spider_from_right_moves_left_speed_positive():
    spawner, world, _ = make_spawner(0, 1, 0)
    spawner.spawn_spider(2, 4, 6)
    spawner.spider_alarm()
    assert world.created[0].args == ((world.window_width, 400.0), 6)
    assert spawner.alarms[SPIDER_ALARM] == 2.0


def test_flea_only_when_mushrooms_below_threshold():
    spawner, world, _ = make_spawner(0, 4, 0, mushrooms=3)
    spawner.spawn_flea(1, 3, 5)
    spawner.flea_alarm()
    assert world.created[0].args == ((80.0, 0.0),)
    assert spawner.flea_here is True

    crowded, crowded_world, _ = make_spawner(0, 0, mushrooms=9)
    crowded.spawn_flea(1, 3, 5)
    crowded.flea_alarm()
    assert crowded_world.created == []
    assert crowded.alarms[FLEA_ALARM] == 1.0


def test_equal_min_and_max_time_rejected():
    spawner, _, _ = make_spawner()
    with pytest.raises(ValueError):
        spawner.spawn_spider(4, 4, 1)


def test_spawn_centipede_links_segments_to_head():
    spawner, world, _ = make_spawner()
    head = spawner.spawn_centipede(3, 4)
    segments = [c for c in world.created if c.kind == "segment"]
    assert len(segments) == 2
    assert segments[0].args[2] is None
    assert segments[1].args[2] is segments[0]
    assert head.args[2] is segments[1]
    assert head.args[0] == (world.window_width / 2, world.head_height)
    assert spawner.heads == [head]
    assert spawner.head_count == 1


def test_single_length_centipede_is_only_a_head():
    spawner, world, _ = make_spawner()
    head = spawner.spawn_centipede(1, 4)
    assert world.created == [head]
    assert head.args[2] is None


def test_zero_length_centipede_rejected():
    spawner, _, _ = make_spawner()
    with pytest.raises(ValueError):
        spawner.spawn_centipede(0, 4)


def test_last_head_killed_ends_centipede():
    spawner, _, waves = make_spawner()
    head = spawner.spawn_centipede(2, 4)
    split = Critter("head")
    spawner.segment_squashed(split)
    assert spawner.head_count == 2
    spawner.head_squashed(head)
    assert waves.deaths == 0
    spawner.head_squashed(split)
    assert waves.deaths == 1
    assert spawner.heads == []


def test_new_wave_clears_everything():
    spawner, world, _ = make_spawner(0, 0, 0, 0, 0, 0, 0, 0, 0, 0, mushrooms=0)
    spawner.spawn_scorpion(1, 2, 1)
    spawner.spawn_spider(1, 2, 1)
    spawner.spawn_flea(1, 2, 5)
    spawner.scorpion_alarm()
    spawner.spider_alarm()
    spawner.flea_alarm()
    head = spawner.spawn_centipede(1, 4)
    spawner.new_wave()
    assert all(c.squashed == 1 for c in world.created)
    assert head.squashed == 1
    assert not (spawner.scorpion_here or spawner.spider_here or spawner.flea_here)
    assert spawner.head_count == 0
    assert set(spawner.alarms) == {SCORPION_REARM_ALARM}


def test_pause_critters_pauses_present_ones():
    spawner, world, _ = make_spawner(0, 0, 0)
    spawner.spawn_spider(1, 2, 1)
    spawner.spider_alarm()
    head = spawner.spawn_centipede(1, 4)
    spawner.pause_critters()
    assert head.paused == 1
    assert spawner.spider.paused == 1
    spawner.spider_squashed()
    spawner.pause_critters()
    assert spawner.spider.paused == 1
    assert head.paused == 2