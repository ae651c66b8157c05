"""Recycling pools and factories for short-lived game objects."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class ObjectPool(Generic[T]):
    """A stack of idle objects that are handed out again before new ones are made."""

    def __init__(self, make: Callable[[], T]) -> None:
        self._make = make
        self._idle: list[T] = []

    def acquire(self) -> T:
        """Return the most recently released object, or a new one if none are idle."""
        if self._idle:
            return self._idle.pop()
        return self._make()

    def release(self, item: T) -> None:
        """Put an object back so a later acquire can reuse it."""
        self._idle.append(item)

    def __len__(self) -> int:
        return len(self._idle)


class RecyclingFactory(Generic[T]):
    """Creates objects from a pool and takes them back when they are destroyed.

    Each created object is given a ``recycler`` attribute: calling it returns
    the object to this factory instead of discarding it. The object's
    ``initialize`` method receives the arguments passed to :meth:`create`.
    """

    def __init__(self, make: Callable[[], T]) -> None:
        self._make = make
        self._pool: ObjectPool[T] = ObjectPool(make)

    @property
    def idle(self) -> int:
        """Number of objects waiting in the pool."""
        return len(self._pool)

    def create(self, *args, **kwargs) -> T:
        """Take an object from the pool, hand it back to us on destruction, and initialise it."""
        item = self._pool.acquire()
        item.recycler = self.recycle
        item.initialize(*args, **kwargs)
        return item

    def recycle(self, item: T) -> None:
        """Return an object to the pool."""
        self._pool.release(item)

    def clear(self) -> None:
        """Drop every idle object and start over with an empty pool."""
        self._pool = ObjectPool(self._make)