"""Finds the note files under a root folder.

Generally, you should use :meth:`notemanager.api.Notemanager.notes` instead of using this module directly.
"""

import logging
import os
import os.path
from typing import Callable, ContextManager, Iterable, List

from notemanager.conf import default_ignore, default_is_note
from notemanager.errors import DirectoryUnreadableError

logger = logging.getLogger(__name__)

ScandirFn = Callable[[str], ContextManager[Iterable[os.DirEntry]]]


def _read_dir(path: str, scandir: ScandirFn) -> List[os.DirEntry]:
    with scandir(path) as entries:
        return list(entries)


def discover(root: str, ignore: Callable[[str, str], bool] = default_ignore,
             is_note: Callable[[str, str], bool] = default_is_note, scandir: ScandirFn = None) -> List[str]:
    """Returns the paths, relative to root, of every note in root and its subfolders.

    Paths are listed depth-first in the order the filesystem enumerates directory entries, so they are
    generally not sorted. Folders for which ``ignore`` returns True are not entered; ``ignore`` is only
    consulted for folders, so every file ``is_note`` accepts is listed wherever it is not inside an ignored
    folder. Symlinks are followed, to folders as well as files. Broken symlinks are skipped.

    Raises :exc:`notemanager.errors.DirectoryUnreadableError` if root itself cannot be read. Subfolders or
    entries that cannot be read are logged and skipped.

    ``scandir`` may be given to read directories from somewhere other than :func:`os.scandir`; it must
    behave the same way, returning a context manager that iterates over entries with ``name`` and ``path``
    attributes and ``is_dir`` and ``is_file`` methods.
    """
    scandir = scandir or os.scandir
    try:
        entries = _read_dir(root, scandir)
    except OSError as e:
        raise DirectoryUnreadableError(f'Could not read directory {root!r}: {e.strerror or e}', root, e)

    result = []
    # Each item holds the remaining entries of one open folder, so the walk resumes where it left off.
    stack = [(root, '', iter(entries))]
    while stack:
        dirpath, reldir, pending = stack[-1]
        entry = next(pending, None)
        if entry is None:
            stack.pop()
            continue
        relpath = os.path.join(reldir, entry.name)
        try:
            if entry.is_dir():
                if ignore(dirpath, entry.name):
                    logger.debug('Ignoring %s', entry.path)
                    continue
                stack.append((entry.path, relpath, iter(_read_dir(entry.path, scandir))))
            elif entry.is_file() and is_note(dirpath, entry.name):
                result.append(relpath)
        except OSError as e:
            logger.warning('Skipping unreadable path %s: %s', entry.path, e.strerror or e)
    return result
