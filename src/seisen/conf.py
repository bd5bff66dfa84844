from __future__ import annotations
from dataclasses import dataclass, field, replace
import os.path
from typing import Dict, Optional

from seisen.models import SeisenError
from seisen.picker import SENTINEL


def default_categories() -> Dict[str, str]:
    return {
        'sensei_notes': 'Breathe deeply.\nKeep going.\nYou will succeed.\n',
        'samurai': 'Mastery comes from discipline.\nMove forward even when wounded.\n'
                   'Doubt is the enemy of the sword.\n',
        'zen': 'Breathe.\nCome back to the present.\nCalm is a strength.\n',
        '42': 'Read the man page.\nTame the memory.\nTrue code is humble.\n',
        'life': 'Drink some water.\nCall someone you love.\nTidy your mind.\n',
        'custom': 'Write your own way.\n',
    }


@dataclass
class SeisenConf:
    notes_dir: str = os.path.join('~', 'Seisen')
    """Folder holding one notes file per category, named ``<category>.txt``.

    It is created, along with any missing category files, by :meth:`seisen.api.Seisen.ensure_category_files`.
    """

    categories: Dict[str, str] = field(default_factory=default_categories)
    """Maps each category name to the sample content written when its file does not exist yet.

    Order is kept for display. Existing files are never overwritten with the sample content.
    """

    default_category: str = 'sensei_notes'
    """Category used when a command or method does not specify one. Must be a key of :attr:`categories`."""

    sentinel: str = SENTINEL
    """Text returned instead of a note when nothing is loaded."""

    max_notes: Optional[int] = None
    """If set, loading stops once this many notes are held. Unlimited by default."""

    max_line_length: Optional[int] = None
    """If set, lines longer than this are skipped when loading. Unlimited by default."""

    seed: Optional[int] = None
    """Seed for the random generator. If None, picks differ on every run."""

    note_template: Optional[str] = None
    """Mako template used by the CLI to print each picked note, for example ``'~ ${note} ~'``.

    The names ``note`` and ``category`` are defined in the template's namespace. ``category`` is None when notes
    were loaded from explicit files. If this is None, notes are printed as-is.
    """

    @classmethod
    def user_config_path(cls) -> str:
        return os.path.expanduser(os.path.join('~', '.seisen.conf.py'))

    @classmethod
    def for_user(cls) -> SeisenConf:
        """Loads the config assigned to ``conf`` in ``~/.seisen.conf.py``.

        If the file does not exist, the default config is returned. Raises :exc:`seisen.models.SeisenError` if
        the file exists but does not assign an instance of this class to ``conf``.
        """
        path = cls.user_config_path()
        if not os.path.exists(path):
            return cls()
        with open(path, 'r') as file:
            conf_script = file.read()
        context = {}
        exec(conf_script, context)
        if 'conf' not in context or not isinstance(context['conf'], cls):
            raise SeisenError('You need to assign an instance of SeisenConf to the variable `conf` '
                              f'in your config file: {path}')
        return context['conf']

    def standardize(self):
        return replace(
            self,
            notes_dir=os.path.realpath(os.path.expanduser(self.notes_dir))
        )

    def instantiate(self):
        from seisen.api import Seisen
        return Seisen(self.standardize())
