"""Finds, edits and syncs notes stored as Markdown files under a directory.

If you installed via ``pip``, run ``notemanager -h`` to get help.
Or, run ``python3 -m notemanager -h``.

To use the Python API, look at :class:`notemanager.api.Notemanager`
"""
