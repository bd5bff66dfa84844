"""Serves random notes read from plain text files, one note per line.

If you installed via ``pip``, run ``seisen -h`` to get help.

To use the Python API, look at :class:`seisen.api.Seisen`, or for the lower-level pieces
:func:`seisen.store.load_notes` and :class:`seisen.picker.NotePicker`.
"""
