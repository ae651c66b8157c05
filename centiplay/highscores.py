"""The eight-place high-score table and the initials entry that fills it."""

from __future__ import annotations

from typing import Callable

RANKS = 8
"""Number of places on the high-score table."""

MAX_INITIALS = 3
"""Longest set of initials a player may enter."""

BLANK_INITIALS = " "


class InitialsEntry:
    """Collects up to three characters typed by a player and submits them on Enter."""

    def __init__(self, on_submit: Callable[[str], None]) -> None:
        self._on_submit = on_submit
        self._chars: list[str] = []
        self.finished = False

    @property
    def text(self) -> str:
        """The initials typed so far."""
        return "".join(self._chars)

    def text_entered(self, char: str) -> None:
        """Handle one typed character: backspace, carriage return or a letter."""
        if self.finished:
            return
        if char == "\b":
            if self._chars:
                self._chars.pop()
        elif char == "\r":
            self.finished = True
            self._on_submit(self.text)
        elif len(self._chars) < MAX_INITIALS:
            self._chars.append(char)


class HighScoreTable:
    """Eight ranked scores, each with the initials of whoever set it.

    A qualifying score replaces the value at the first rank it beats; the
    lower ranks are not shifted. ``on_finished`` is called once the table has
    nothing more to ask of the players and the game can return to its
    attract screen.
    """

    def __init__(self) -> None:
        self._scores = [0] * RANKS
        self._initials = [BLANK_INITIALS] * RANKS
        self._pending: int | None = None
        self.on_finished: Callable[[], None] = lambda: None

    def _index(self, rank: int) -> int:
        if not 1 <= rank <= RANKS:
            raise IndexError(f"rank must be between 1 and {RANKS}, got {rank}")
        return rank - 1

    def _place(self, score: int) -> InitialsEntry | None:
        for index, held in enumerate(self._scores):
            if score > held:
                self._scores[index] = score
                self._pending = index
                return InitialsEntry(self.receive_initials)
        return None

    @property
    def pending_rank(self) -> int | None:
        """Rank (1-based) the next initials will be stored under, if any."""
        return None if self._pending is None else self._pending + 1

    def check_scores(self, score1: int, score2: int) -> list[InitialsEntry]:
        """Enter the final scores; return an initials entry for each one that placed.

        A non-zero ``score2`` means a second player took part. With a single
        player and no placing score, the table is finished at once.
        """
        if score2 != 0:
            entries = [self._place(score1), self._place(score2)]
            return [entry for entry in entries if entry is not None]
        entry = self._place(score1)
        if entry is None:
            self.on_finished()
            return []
        return [entry]

    def receive_initials(self, initials: str) -> None:
        """Store initials against the score most recently placed."""
        if self._pending is None:
            raise RuntimeError("no score is waiting for initials")
        self._initials[self._pending] = initials
        self.on_finished()

    def score(self, rank: int) -> int:
        """Score held at ``rank`` (1 is the top)."""
        return self._scores[self._index(rank)]

    def initials(self, rank: int) -> str:
        """Initials held at ``rank`` (1 is the top)."""
        return self._initials[self._index(rank)]

    def entries(self) -> list[tuple[int, str]]:
        """Every rank from the top down as ``(score, initials)``."""
        return list(zip(self._scores, self._initials))