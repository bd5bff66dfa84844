"""Provides the main entry point for using the library, :class:`Seisen`"""

from __future__ import annotations
import logging
import os.path
from typing import Dict, Iterable, List, Optional

from seisen.conf import SeisenConf
from seisen.models import NoteStore, UnknownCategoryError
from seisen.picker import NotePicker
from seisen.store import load_notes, append_note, write_sample


logger = logging.getLogger(__name__)


class Seisen:
    """Serves random notes from the category files in your notes folder.

    Generally, you should get an instance using the :meth:`Seisen.for_user` method. Call :meth:`close` when you're
    done with it, or else use it as a context manager.

    Loading a category replaces whatever was loaded before; use :meth:`load_files` to combine several files.

    .. attribute:: conf
       :type: seisen.conf.SeisenConf

    .. attribute:: store
       :type: seisen.models.NoteStore

       Notes currently being served. Empty until something is loaded.

    .. attribute:: picker
       :type: seisen.picker.NotePicker

    Here's an example that prints a note from the "zen" category:

    .. code-block:: python

       from seisen.api import Seisen
       with Seisen.for_user() as sn:
           sn.ensure_category_files()
           sn.load_category('zen')
           print(sn.get_note())
    """

    @staticmethod
    def for_user() -> Seisen:
        """Creates an instance using the user's ``~/.seisen.conf.py`` file, or the defaults if there is none."""
        return SeisenConf.for_user().instantiate()

    def __init__(self, conf: SeisenConf):
        if conf.default_category not in conf.categories:
            raise UnknownCategoryError(conf.default_category)
        self.conf = conf
        self.category: Optional[str] = None
        self.store = self._new_store()
        self.picker = NotePicker(self.store, seed=conf.seed, sentinel=conf.sentinel)

    def _new_store(self) -> NoteStore:
        return NoteStore(max_notes=self.conf.max_notes, max_line_length=self.conf.max_line_length)

    def _serve(self, store: NoteStore, category: Optional[str]) -> NoteStore:
        self.store.cleanup()
        self.store = store
        self.picker.store = store
        self.category = category
        return store

    def category_path(self, category: str) -> str:
        """Returns the path of the notes file for the category.

        Raises :exc:`seisen.models.UnknownCategoryError` if the category is not configured.
        """
        if category not in self.conf.categories:
            raise UnknownCategoryError(category)
        return os.path.join(self.conf.notes_dir, f'{category}.txt')

    def ensure_category_files(self) -> List[str]:
        """Creates the notes folder and any missing category files, filled with their sample content.

        Returns the paths of files that were created.
        """
        created = []
        for category, sample in self.conf.categories.items():
            path = self.category_path(category)
            if write_sample(path, sample):
                logger.debug('Created %s', path)
                created.append(path)
        return created

    def load_category(self, category: str = None) -> NoteStore:
        """Replaces the current notes with those from the category's file, and returns the new store.

        Uses :attr:`seisen.conf.SeisenConf.default_category` if no category is given.
        """
        category = category or self.conf.default_category
        store = self._new_store()
        load_notes(store, self.category_path(category))
        return self._serve(store, category)

    def load_files(self, paths: Iterable[str]) -> NoteStore:
        """Replaces the current notes with those from all the given files, in order, and returns the new store."""
        store = self._new_store()
        for path in paths:
            load_notes(store, path)
        return self._serve(store, None)

    def get_note(self) -> str:
        """Returns a random note from what is currently loaded, or the configured sentinel if nothing is."""
        return self.picker.get_note()

    def add_note(self, text: str, category: str = None) -> Optional[str]:
        """Adds a note as a new line at the end of the category's file, then loads that category.

        Surrounding whitespace is removed. Returns the text that was added, or None if it was blank.
        """
        category = category or self.conf.default_category
        path = self.category_path(category)
        text = text.strip()
        if not text:
            return None
        os.makedirs(os.path.dirname(path), exist_ok=True)
        append_note(path, text)
        self.load_category(category)
        return text

    def category_counts(self) -> Dict[str, int]:
        """Returns a map of category names to the number of notes each category would serve once loaded."""
        counts = {}
        for category in self.conf.categories:
            store = self._new_store()
            path = self.category_path(category)
            counts[category] = load_notes(store, path) if os.path.isfile(path) else 0
        return counts

    def close(self):
        """Releases any resources held for the loaded notes."""
        self.store.cleanup()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
