"""Reads and writes notes files.

A notes file is plain UTF-8 text with one note per line.
"""

import logging
import os
import os.path

from seisen.models import NoteStore, LoadError, CapacityExceeded


logger = logging.getLogger(__name__)


def _strip_terminator(line: str) -> str:
    if line.endswith('\r\n'):
        return line[:-2]
    if line.endswith('\n') or line.endswith('\r'):
        return line[:-1]
    return line


def load_notes(store: NoteStore, filepath: str) -> int:
    """Appends each line of the file to the store, in file order, and returns how many were added.

    Line terminators are stripped. Blank lines are kept as empty notes. Bytes that are not valid UTF-8 are
    replaced with U+FFFD, so such lines are still loaded. Previously stored notes are kept, so loading several
    files accumulates them.

    This never raises for problems with the file. If it cannot be opened, a warning is logged and the store
    is left unchanged. If reading fails partway, lines read before the failure are kept. In both cases the
    :exc:`seisen.models.LoadError` describing the problem is attached to the log record as ``load_error``.

    If the store has a ``max_line_length``, longer lines are skipped with a warning. If it has a ``max_notes``,
    loading stops with a warning once the store is full.
    """
    try:
        file = open(filepath, 'r', encoding='utf-8', errors='replace', newline='')
    except OSError as ex:
        error = LoadError(f'Unable to open notes file {filepath}: {ex.strerror or ex}', filepath, ex)
        logger.warning(error.message, extra={'load_error': error})
        return 0

    added = 0
    with file:
        try:
            for lineno, line in enumerate(file, 1):
                note = _strip_terminator(line)
                try:
                    store.append(note)
                except CapacityExceeded as ex:
                    if store.is_full():
                        logger.warning('Stopped loading %s at line %d: %s', filepath, lineno, ex.message)
                        break
                    logger.warning('Skipped line %d of %s: %s', lineno, filepath, ex.message)
                    continue
                added += 1
        except OSError as ex:
            error = LoadError(f'Error reading notes file {filepath}: {ex}', filepath, ex)
            logger.warning('%s; kept %d notes read before the error', error.message, added,
                           extra={'load_error': error})

    logger.debug('Loaded %d notes from %s', added, filepath)
    return added


def append_note(filepath: str, text: str) -> None:
    """Adds the text as a new last line of the file, creating the file if needed.

    If the file doesn't end with a newline, one is written first so the text lands on its own line.
    """
    needs_newline = False
    if os.path.isfile(filepath) and os.path.getsize(filepath) > 0:
        with open(filepath, 'rb') as file:
            file.seek(-1, os.SEEK_END)
            needs_newline = file.read(1) not in (b'\n', b'\r')
    with open(filepath, 'a', encoding='utf-8') as file:
        if needs_newline:
            file.write('\n')
        file.write(f'{text}\n')


def write_sample(filepath: str, contents: str) -> bool:
    """Writes the contents to the file if nothing exists at that path yet.

    Returns True if the file was created.
    """
    if os.path.exists(filepath):
        return False
    os.makedirs(os.path.dirname(filepath) or '.', exist_ok=True)
    with open(filepath, 'w', encoding='utf-8') as file:
        file.write(contents)
    return True
