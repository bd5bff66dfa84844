"""Defines the in-memory note collection and the errors raised while filling it.

The most important class is :class:`NoteStore`.
"""

from typing import Iterator, List, Optional


LEGACY_MAX_NOTES = 100
"""Note count the first version of seisen could hold. Not enforced unless passed as ``max_notes``."""

LEGACY_MAX_LINE_LENGTH = 255
"""Line length the first version of seisen could hold. Not enforced unless passed as ``max_line_length``."""


class SeisenError(Exception):
    """Base class for errors raised by seisen."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LoadError(SeisenError):
    """Describes a notes file that could not be opened or fully read."""
    def __init__(self, message: str, path: str, cause: BaseException = None):
        super().__init__(message)
        self.path = path
        self.cause = cause


class CapacityExceeded(SeisenError):
    """Raised when adding a note to a :class:`NoteStore` would exceed one of its limits."""
    def __init__(self, message: str, limit: int):
        super().__init__(message)
        self.limit = limit


class UnknownCategoryError(SeisenError):
    """Raised when a category is requested that is not in :attr:`seisen.conf.SeisenConf.categories`."""
    def __init__(self, category: str):
        super().__init__(f'Unknown category: {category}')
        self.category = category


class NoteStore:
    """Ordered collection of notes, kept in the order they were added.

    Storage grows as needed. If ``max_notes`` or ``max_line_length`` are given, :meth:`append` checks them
    and raises :exc:`CapacityExceeded` instead of storing a note that would break them.

    A store is owned by whoever creates it; pass it to :func:`seisen.store.load_notes` to fill it and to
    :class:`seisen.picker.NotePicker` to draw from it.
    """
    def __init__(self, max_notes: Optional[int] = None, max_line_length: Optional[int] = None):
        if max_notes is not None and max_notes < 0:
            raise ValueError('max_notes must not be negative')
        if max_line_length is not None and max_line_length < 0:
            raise ValueError('max_line_length must not be negative')
        self.max_notes = max_notes
        self.max_line_length = max_line_length
        self._notes: List[str] = []

    def append(self, note: str) -> None:
        if self.max_line_length is not None and len(note) > self.max_line_length:
            raise CapacityExceeded(f'Note is {len(note)} characters long, limit is {self.max_line_length}',
                                   self.max_line_length)
        if self.is_full():
            raise CapacityExceeded(f'Store already holds {self.max_notes} notes', self.max_notes)
        self._notes.append(note)

    def is_full(self) -> bool:
        return self.max_notes is not None and len(self._notes) >= self.max_notes

    @property
    def notes(self) -> List[str]:
        """A copy of the stored notes."""
        return list(self._notes)

    def cleanup(self) -> None:
        """Release any resources held by the store.

        Notes live in ordinary Python objects, so there is currently nothing to release. Safe to call at any time.
        """
        pass

    def __len__(self) -> int:
        return len(self._notes)

    def __getitem__(self, index: int) -> str:
        return self._notes[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._notes)

    def __repr__(self):
        return f'NoteStore({len(self._notes)} notes, max_notes={self.max_notes}, ' \
               f'max_line_length={self.max_line_length})'
