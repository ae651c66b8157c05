"""Mushrooms, fleas, bullets and the short explosion animations."""

from __future__ import annotations

import random
from typing import Callable, Optional, Protocol

Position = tuple[float, float]

OFFSCREEN: Position = (2000.0, 2000.0)
"""Where a destroyed mushroom is parked so it can no longer be hit."""

MUSHROOM_KILLED = "MushroomKilled"
FLEA_KILLED = "FleaKilled"
FLEA_SPAWN = "FleaSpawn"

MUSHROOM_MAX_HEALTH = 4
"""Bullet hits that destroy a mushroom."""
MUSHROOM_LAST_FRAME = 7

FLEA_HEALTH = 2
FLEA_SPEED = 4
FLEA_SPEED_FACTOR = 2
FLEA_ALARM_CHOICES = 4
FLEA_ALARM_DIVISOR = 10

BULLET_SPEED = 15

DEATH_FRAMES = (0, 19)
EXPLODE_FRAMES = (0, 5)


class World(Protocol):
    """What mushrooms and fleas need from the running game."""

    cell_size: int
    window_height: float

    def score(self, event: str) -> None: ...

    def play_sound(self, event: str) -> None: ...

    def stop_sound(self, event: str) -> None: ...

    def create_mushroom(self, pos: Position) -> None: ...

    def remove_mushroom(self, pos: Position) -> None: ...

    def create_explode(self, pos: Position) -> None: ...

    def mark_for_destroy(self, obj: object) -> None: ...


class Blaster(Protocol):
    """The player's ship, told when its bullet has gone."""

    def reload(self) -> None: ...


class FleaSpawner(Protocol):
    def flea_squashed(self) -> None: ...


class _Recyclable:
    recycler: Optional[Callable[[object], None]] = None

    def _release(self) -> None:
        self.collidable = False
        if self.recycler is not None:
            self.recycler(self)


class Mushroom(_Recyclable):
    """A mushroom that takes four bullet hits and can be poisoned by a scorpion."""

    def __init__(self, world: World) -> None:
        self.world = world
        self.pos: Position = (0.0, 0.0)
        self.health = 0
        self.poisoned = False
        self.frame = 0
        self.animation = (0, 3)
        self.collidable = True
        self.recycler = None

    def initialize(self, pos: Position) -> None:
        """Place a fresh, unharmed mushroom at ``pos``."""
        self.health = 0
        self.poisoned = False
        self.frame = 0
        self.animation = (0, 3)
        self.pos = pos
        self.collidable = True

    def hit_by_bullet(self) -> None:
        """Take one hit; the fourth one destroys the mushroom."""
        self.health += 1
        if self.health == MUSHROOM_MAX_HEALTH:
            self.world.score(MUSHROOM_KILLED)
            self.world.remove_mushroom(self.pos)
            self.world.mark_for_destroy(self)
        else:
            self.frame += 1

    def hit_by_scorpion(self) -> None:
        """Become poisoned, keeping the damage already taken."""
        self.poisoned = True
        self.frame = MUSHROOM_MAX_HEALTH + self.health
        self.animation = (self.frame, MUSHROOM_LAST_FRAME)

    def hit_by_spider(self) -> None:
        """Get eaten by the spider."""
        self.world.remove_mushroom(self.pos)
        self.world.mark_for_destroy(self)

    def destroy(self) -> None:
        """Move off screen, stop colliding and go back to the pool."""
        self.pos = OFFSCREEN
        self._release()

    def heal(self) -> None:
        """Restore full health and remove any poison."""
        self.health = 0
        self.poisoned = False
        self.frame = 0
        self.animation = (0, 3)

    def life_alert(self) -> bool:
        """Whether the mushroom is damaged or poisoned."""
        return self.poisoned or self.health != 0

    def is_mushroom(self) -> bool:
        return True


class Flea(_Recyclable):
    """Drops straight down, seeding mushrooms as it goes."""

    def __init__(self, world: World, rng: Optional[random.Random] = None) -> None:
        self.world = world
        self.rng = rng if rng is not None else random.Random()
        self.pos: Position = (0.0, 0.0)
        self.health = FLEA_HEALTH
        self.speed = FLEA_SPEED
        self.spawner: Optional[FleaSpawner] = None
        self.collidable = True
        self.recycler = None
        self.mushroom_alarm: Optional[float] = None
        self._schedule_mushroom()

    def _schedule_mushroom(self) -> None:
        self.mushroom_alarm = self.rng.randrange(FLEA_ALARM_CHOICES) / FLEA_ALARM_DIVISOR

    def initialize(self, pos: Position, spawner: FleaSpawner) -> None:
        """Start a fresh flea at ``pos``."""
        self.pos = pos
        self.health = FLEA_HEALTH
        self.speed = FLEA_SPEED
        self.world.play_sound(FLEA_SPAWN)
        self.collidable = True
        self.spawner = spawner
        self._schedule_mushroom()

    def update(self) -> None:
        """Fall one step; leave the field once below the window."""
        self.pos = (self.pos[0], self.pos[1] + self.speed)
        if self.pos[1] > self.world.window_height:
            self.mushroom_alarm = None
            self.world.mark_for_destroy(self)

    def hit_by_bullet(self) -> None:
        """First hit doubles its speed and stops the seeding; second kills it."""
        self.health -= 1
        if self.health == 1:
            self.mushroom_alarm = None
            self.speed *= FLEA_SPEED_FACTOR
        elif self.health == 0:
            self.world.create_explode(self.pos)
            self.world.score(FLEA_KILLED)
            self.world.mark_for_destroy(self)

    def drop_mushroom(self) -> None:
        """Plant a mushroom beside the flea and schedule the next one."""
        self.world.create_mushroom((self.pos[0] - self.world.cell_size, self.pos[1]))
        self._schedule_mushroom()

    def destroy(self) -> None:
        """Silence, stop seeding, stop colliding and go back to the pool."""
        self.world.stop_sound(FLEA_SPAWN)
        self.mushroom_alarm = None
        self._release()

    def squash(self) -> None:
        """Remove the flea at the end of a wave."""
        if self.spawner is not None:
            self.spawner.flea_squashed()
        self.world.mark_for_destroy(self)

    def pause(self) -> None:
        self.speed = 0


class Bullet(_Recyclable):
    """The player's shot, flying straight up."""

    def __init__(self) -> None:
        self.pos: Position = (0.0, 0.0)
        self.blaster: Optional[Blaster] = None
        self.marked = False
        self.collidable = True
        self.recycler = None

    def initialize(self, pos: Position, blaster: Blaster) -> None:
        self.pos = pos
        self.blaster = blaster
        self.marked = False
        self.collidable = True

    def update(self) -> None:
        """Move up; leaving the top of the window ends the shot."""
        self.pos = (self.pos[0], self.pos[1] - BULLET_SPEED)
        if self.pos[1] <= 0:
            self.marked = True

    def hit(self) -> None:
        """The bullet struck something and is spent."""
        self.marked = True

    def destroy(self) -> None:
        """Let the blaster fire again, stop colliding and go back to the pool."""
        if self.blaster is not None:
            self.blaster.reload()
        self._release()


class Animation(_Recyclable):
    """A one-shot sprite animation that ends itself on its last frame."""

    def __init__(
        self,
        first_frame: int,
        last_frame: int,
        on_finish: Optional[Callable[[], None]] = None,
    ) -> None:
        self.first_frame = first_frame
        self.last_frame = last_frame
        self.on_finish = on_finish
        self.pos: Position = (0.0, 0.0)
        self.frame = first_frame
        self.marked = False
        self.recycler = None

    def initialize(self, pos: Position) -> None:
        self.pos = pos
        self.frame = self.first_frame
        self.marked = False

    def update(self) -> None:
        """Finish if on the last frame, then advance one frame."""
        if self.frame == self.last_frame:
            if self.on_finish is not None:
                self.on_finish()
            self.marked = True
        self.frame = self.first_frame if self.frame >= self.last_frame else self.frame + 1

    def destroy(self) -> None:
        if self.recycler is not None:
            self.recycler(self)


def make_death(on_finish: Callable[[], None]) -> Animation:
    """The player's death animation; ``on_finish`` runs when it has played out."""
    return Animation(DEATH_FRAMES[0], DEATH_FRAMES[1], on_finish)


def make_explode() -> Animation:
    """The puff left behind by a killed critter."""
    return Animation(EXPLODE_FRAMES[0], EXPLODE_FRAMES[1])