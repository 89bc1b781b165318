"""Provides the main entry point for using the library, :class:`Notemanager`"""

from __future__ import annotations
import logging
import os.path
from typing import Callable, List

from notemanager.conf import NotemanagerConf
from notemanager.discovery import discover
from notemanager.editor import edit_file
from notemanager.errors import NoMatchError
from notemanager.selection import select
from notemanager.sync import sync as sync_folder

logger = logging.getLogger(__name__)


class Notemanager:
    """Main entry point for working programmatically with a folder of notes.

    Generally, you should get an instance using :meth:`Notemanager.for_cwd`, or by calling
    :meth:`notemanager.conf.NotemanagerConf.instantiate`.

    .. attribute:: conf
       :type: notemanager.conf.NotemanagerConf

    Here's an example of how to use this class. This would open the only note whose path fuzzy-matches
    "mtgnts", and then commit and push the notes folder:

    .. code-block:: python

       from notemanager.api import Notemanager
       nm = Notemanager.for_cwd()
       nm.edit('mtgnts')
    """

    @staticmethod
    def for_cwd(**kwargs) -> Notemanager:
        """Creates an instance for the current working directory.

        Keyword arguments are passed along to :class:`notemanager.conf.NotemanagerConf`.
        """
        return NotemanagerConf.for_cwd(**kwargs).instantiate()

    def __init__(self, conf: NotemanagerConf):
        self.conf = conf

    def notes(self) -> List[str]:
        """Returns the paths of all notes, relative to the root folder, in the order they were found.

        Raises :exc:`notemanager.errors.DirectoryUnreadableError` if the root folder cannot be read.
        """
        return discover(self.conf.root, self.conf.ignore, self.conf.is_note)

    def matches(self, pattern: str) -> List[str]:
        """Returns the notes whose paths fuzzy-match pattern, in the order they were found."""
        return select(self.notes(), pattern)

    def resolve(self, pattern: str) -> List[str]:
        """Like :meth:`matches`, but raises :exc:`notemanager.errors.NoMatchError` if nothing matches."""
        found = self.matches(pattern)
        if not found:
            raise NoMatchError(pattern)
        return found

    def open_note(self, path: str) -> None:
        """Opens the note at path (relative to the root folder) in the editor and waits for it to exit.

        Raises :exc:`notemanager.errors.EditorError` if the editor fails.
        """
        edit_file(os.path.join(self.conf.root, path), self.conf.editor)

    def edit(self, pattern: str, before_edit: Callable[[str], None] = None,
             before_sync: Callable[[str], None] = None) -> List[str]:
        """Edits the note matching pattern, then syncs the notes folder.

        Returns the list of matching notes. If there is exactly one, it is opened in the editor, and once
        the editor exits the folder is synced (unless sync is disabled in the conf). If there is more than
        one, nothing is edited; it is up to the caller to show the matches to the user. An ambiguous
        pattern is never resolved automatically.

        before_edit and before_sync, if given, are called with the path of the note just before the editor
        is opened and just before the sync starts, so callers can report progress.

        Raises :exc:`notemanager.errors.NoMatchError` if nothing matches, and
        :exc:`notemanager.errors.EditorError` or :exc:`notemanager.errors.SyncError` if those steps fail.
        The sync is not attempted if the editor fails.
        """
        found = self.resolve(pattern)
        if len(found) > 1:
            logger.info('Pattern %r matched %d notes; not editing', pattern, len(found))
            return found
        path = found[0]
        if before_edit:
            before_edit(path)
        self.open_note(path)
        if self.conf.sync:
            if before_sync:
                before_sync(path)
            self.sync()
        return found

    def sync(self) -> None:
        """Stages, commits and pushes all changes in the root folder. See :func:`notemanager.sync.sync`."""
        sync_folder(self.conf.root, fail_fast=self.conf.sync_fail_fast)
