"""Monotonic identity generator for clients, projects, users and guests."""

import itertools

from dashboard.domain.entities import StoreSnapshot


class IdSequence:
    """Hands out strictly increasing integer identities.

    Seeded past the largest identity already present so that generated ids
    never collide with seeded records.
    """

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    @classmethod
    def after(cls, snapshot: StoreSnapshot) -> "IdSequence":
        return cls(snapshot.max_numeric_id() + 1)

    def __call__(self) -> int:
        return next(self._counter)
