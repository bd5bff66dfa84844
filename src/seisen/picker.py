"""Provides :class:`NotePicker` for drawing random notes from a :class:`seisen.models.NoteStore`."""

import random
from typing import Optional

from seisen.models import NoteStore


SENTINEL = 'No note available'
"""Returned by :meth:`NotePicker.get_note` when the store is empty."""


class NotePicker:
    """Draws notes uniformly at random, with replacement, from a store.

    The random source is always explicit. Pass ``rng`` to share a :class:`random.Random` with other code, or
    ``seed`` to get reproducible draws. With neither, a new generator seeded from the operating system is created.
    The module-level functions in :mod:`random` are never used.

    The picker reads the store on every call, so notes loaded after the picker was created are included.

    .. attribute:: store
       :type: seisen.models.NoteStore

    .. attribute:: sentinel
       :type: str
    """
    def __init__(self, store: NoteStore, rng: Optional[random.Random] = None, *, seed=None,
                 sentinel: str = SENTINEL):
        if rng is not None and seed is not None:
            raise ValueError('Pass either rng or seed, not both')
        self.store = store
        self.rng = rng if rng is not None else random.Random(seed)
        self.sentinel = sentinel

    def get_note(self) -> str:
        """Returns a random note, or :attr:`sentinel` if the store is empty."""
        count = len(self.store)
        if count == 0:
            return self.sentinel
        return self.store[self.rng.randrange(count)]
