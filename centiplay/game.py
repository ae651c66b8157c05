"""Game modes, the game controller and the two ways of steering the blaster."""

from __future__ import annotations

import random
from enum import Enum
from typing import Any, Callable, Optional, Protocol


class GameMode(Enum):
    """How many people are playing; zero means the attract-mode demo."""

    ATTRACTOR = 0
    ONE_PLAYER = 1
    TWO_PLAYER = 2


class Scene(Enum):
    """Scenes the game can switch to."""

    ATTRACT = "attract"
    ONE_PLAYER = "one_player"
    TWO_PLAYER = "two_player"


class Key(Enum):
    """Keys the controls respond to."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    SPACE = "space"
    NUM0 = "0"
    NUM1 = "1"
    NUM2 = "2"
    M = "m"


class Blaster(Protocol):
    """The player's ship as seen by a control scheme."""

    def move_left(self) -> None: ...

    def move_right(self) -> None: ...

    def move_up(self) -> None: ...

    def move_down(self) -> None: ...

    def fire(self) -> None: ...


class Actions(Protocol):
    """Game-wide actions a key press can trigger."""

    def clear_fields(self) -> None: ...

    def reset_players(self) -> None: ...

    def change_scene(self, scene: Scene) -> None: ...

    def toggle_mute(self) -> None: ...


class Waves(Protocol):
    def player_died(self) -> None: ...

    def pause_critters(self) -> None: ...

    def centipede_hit_bottom(self) -> None: ...


AI_MIN_TENTHS = 2
AI_CHOICES = 3
AI_DIVISOR = 10


class AIControl:
    """Steers the blaster at random for the attract-mode demo, firing constantly.

    ``alarm`` holds the seconds until the next change of direction; the game
    loop calls :meth:`change_direction` when it runs out.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.x = 0
        self.y = 0
        self.alarm = self._next_delay()

    def _next_delay(self) -> float:
        return (AI_MIN_TENTHS + self.rng.randrange(AI_CHOICES)) / AI_DIVISOR

    def change_direction(self) -> None:
        """Pick a new random heading and schedule the next change."""
        self.x = self.rng.randrange(3)
        self.y = self.rng.randrange(3)
        self.alarm = self._next_delay()

    def execute_input(self, blaster: Blaster) -> None:
        """Move along the current heading and fire."""
        if self.x == 0:
            blaster.move_left()
        if self.x == 1:
            blaster.move_right()
        if self.y == 0:
            blaster.move_up()
        if self.y == 1:
            blaster.move_down()
        blaster.fire()

    def key_pressed(self, key: Key, actions: Actions) -> None:
        """1 or 2 leaves the demo and starts a one- or two-player game."""
        if key is Key.NUM1:
            actions.clear_fields()
            actions.change_scene(Scene.ONE_PLAYER)
        elif key is Key.NUM2:
            actions.clear_fields()
            actions.change_scene(Scene.TWO_PLAYER)


class KeyboardControl:
    """Steers the blaster from the arrow keys and fires on space."""

    def __init__(self, is_pressed: Callable[[Key], bool]) -> None:
        self.is_pressed = is_pressed

    def execute_input(self, blaster: Blaster) -> None:
        """Apply every movement key held down this frame."""
        if self.is_pressed(Key.LEFT):
            blaster.move_left()
        if self.is_pressed(Key.RIGHT):
            blaster.move_right()
        if self.is_pressed(Key.UP):
            blaster.move_up()
        if self.is_pressed(Key.DOWN):
            blaster.move_down()
        if self.is_pressed(Key.SPACE):
            blaster.fire()

    def key_pressed(self, key: Key, actions: Actions) -> None:
        """0 abandons the game for the attract screen; M toggles the sound."""
        if key is Key.NUM0:
            actions.clear_fields()
            actions.reset_players()
            actions.change_scene(Scene.ATTRACT)
        elif key is Key.M:
            actions.toggle_mute()


class GameController:
    """Starts a game in the chosen mode and relays game events to the wave manager."""

    def __init__(
        self,
        make_waves: Callable[["GameController", Any], Waves],
        create_player: Callable[[Any], Any],
        change_scene: Callable[[Scene], None],
    ) -> None:
        self.make_waves = make_waves
        self.create_player = create_player
        self.change_scene = change_scene
        self.rng: random.Random = random.Random()
        self.is_pressed: Callable[[Key], bool] = lambda key: False
        self.mode: GameMode = GameMode.ONE_PLAYER
        self.control: Any = None
        self.waves: Optional[Waves] = None

    def set_mode(self, players: int) -> GameMode:
        """Choose the mode from a player count (0 for the demo)."""
        try:
            self.mode = GameMode(players)
        except ValueError:
            raise ValueError(f"unsupported number of players: {players}") from None
        return self.mode

    @property
    def players(self) -> int:
        """Player count of the current mode; 0 in attract mode."""
        return self.mode.value

    def game_on(self) -> Any:
        """Create the player with the right controls and start the waves."""
        if self.mode is GameMode.ATTRACTOR:
            self.control = AIControl(self.rng)
        else:
            self.control = KeyboardControl(self.is_pressed)
        self.create_player(self.control)
        self.waves = self.make_waves(self, self.control)
        return self.control

    def _require_waves(self) -> Waves:
        if self.waves is None:
            raise RuntimeError("the game has not been started")
        return self.waves

    def player_died(self) -> None:
        self._require_waves().player_died()

    def pause_game(self) -> None:
        self._require_waves().pause_critters()

    def bottom_hit(self) -> None:
        self._require_waves().centipede_hit_bottom()

    def switch(self) -> None:
        """Return to the attract screen once the scores are settled."""
        self.change_scene(Scene.ATTRACT)


def collision_pairs() -> tuple[tuple[str, str], ...]:
    """Pairs of object kinds whose collisions the main scene checks."""
    return (
        ("Mushroom", "Bullet"),
        ("Spider", "Bullet"),
        ("Scorpion", "Bullet"),
        ("Scorpion", "Mushroom"),
        ("Spider", "Mushroom"),
        ("Spider", "MyPlayer"),
        ("CentipedeHead", "MyPlayer"),
        ("CentipedeSegment", "MyPlayer"),
        ("Flea", "MyPlayer"),
        ("CentipedeHead", "Bullet"),
        ("Flea", "Bullet"),
        ("CentipedeSegment", "Bullet"),
        ("Letter", "Bullet"),
    )