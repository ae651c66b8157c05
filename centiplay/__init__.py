"""Game logic for a Centipede-style arcade shooter: pools, critters, spawning, scoring, high scores, HUD text and game control."""

__version__ = "0.1.0"

__all__ = [
    "critters",
    "game",
    "highscores",
    "pool",
    "scoring",
    "spawner",
    "text",
]