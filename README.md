# centiplay

Game logic for a Centipede-style arcade shooter, kept apart from any
graphics or sound layer so it can be driven and tested on its own. The
classes talk to the rest of the game through small protocols (a "world",
a score board, a blaster, a set of actions) that the caller supplies.

## What is inside

- `centiplay.pool`
  - `ObjectPool(make)`: a stack of idle objects. `acquire()` returns the
    most recently released object, or calls `make()` when none is idle;
    `release(item)` puts one back; `len(pool)` counts the idle objects.
  - `RecyclingFactory(make)`: `create(*args, **kwargs)` takes an object
    from its pool, sets the object's `recycler` attribute to the factory's
    `recycle`, and calls the object's `initialize(*args, **kwargs)`.
    `recycle(item)` returns an object to the pool, `idle` reports how many
    are waiting, and `clear()` drops them all.
- `centiplay.critters`
  - `Mushroom`: destroyed by its fourth bullet hit (`hit_by_bullet`),
    poisoned by `hit_by_scorpion`, eaten by `hit_by_spider`; `heal()`,
    `life_alert()` and `is_mushroom()`.
  - `Flea`: falls by `update()`, doubles its speed on the first hit and
    dies on the second, plants mushrooms with `drop_mushroom()`; also
    `squash()` and `pause()`.
  - `Bullet`: flies up 15 units per `update()` and is marked when it leaves
    the top of the window or `hit()` is called; `destroy()` calls the
    blaster's `reload()`.
  - `Animation`, with `make_death(on_finish)` and `make_explode()`: one-shot
    frame animations that mark themselves finished on their last frame.
  - Objects that collide carry a `collidable` flag; their `destroy()` clears
    it and hands the object to its `recycler`, if one is set.
- `centiplay.spawner`
  - `CritterSpawner(waves, world, rng)`: `spawn_scorpion`, `spawn_spider`
    and `spawn_flea` arm timers in its `alarms` dict (seconds keyed by
    slot); the game loop counts them down and calls `scorpion_alarm`,
    `spider_alarm` or `flea_alarm`. `spawn_centipede(length, speed)` builds
    a head with `length - 1` segments through the world's factories. It
    tracks live heads (`segment_squashed`, `head_squashed`, which tells the
    waves `centipede_died()` when the last head goes), and offers
    `new_wave()` and `pause_critters()`.
- `centiplay.scoring`
  - `ScoreValue(points)`: `execute(board)` adds a fixed number of points.
  - `ScoreByDistance(...)`: near, medium and far ranges are the window
    height divided by three divisors; `points_for(spider_pos, player_pos)`
    picks the award and `execute(board, spider_pos, player_pos)` shows and
    adds it.
- `centiplay.highscores`
  - `HighScoreTable`: eight ranks numbered 1 (top) to 8.
    `check_scores(score1, score2)` writes each score into the first rank it
    beats, without shifting the ranks below, and returns an `InitialsEntry`
    for each score that placed. `receive_initials`, `score(rank)`,
    `initials(rank)`, `entries()`, `pending_rank` and an `on_finished`
    callback complete it.
  - `InitialsEntry(on_submit)`: `text_entered(char)` takes up to three
    characters, handles backspace (`"\b"`) and submits on carriage return
    (`"\r"`).
- `centiplay.text`
  - `char_to_index`, `text_to_indices`: cell numbers on the font sheet.
  - `format_score`: zero-pads a score to four characters.
  - `life_string(lives, player_two)`: spare-life markers for the HUD.
  - `Glyph` (one sprite-sheet cell at a position) and `Letter` (a character
    in the field that is not a mushroom).
- `centiplay.game`
  - `GameMode`, `Scene` and `Key` enums.
  - `GameController(make_waves, create_player, change_scene)`:
    `set_mode(players)`, `game_on()` (computer control in attract mode,
    keyboard control otherwise), `player_died()`, `pause_game()`,
    `bottom_hit()` and `switch()` back to the attract screen.
  - `AIControl`: random steering that always fires; `change_direction()`
    picks a new heading. `KeyboardControl(is_pressed)`: arrow keys and
    space. Both have `execute_input(blaster)` and `key_pressed(key, actions)`.
  - `collision_pairs()`: the kinds of object whose collisions the main
    scene checks.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## A short example

    from centiplay.highscores import HighScoreTable
    from centiplay.text import format_score

    table = HighScoreTable()
    [entry] = table.check_scores(1200, 0)
    for char in "ABC\r":
        entry.text_entered(char)
    print(format_score(table.score(1)), table.initials(1))  # 1200 ABC

## What it does not do

- There is no centipede movement or centipede body here: the head's path
  through the mushroom field and the splitting of a shot centipede are
  left to the caller, which supplies them through the spawner's world.
- Nothing is drawn or played: there is no window, sprite, font image or
  sound, and no game loop. Positions, window sizes, sprite sheets and
  sound events come from the caller.
- High scores live only in memory; nothing is saved to disk.
- There is no command to run; the package is a library.