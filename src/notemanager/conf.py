from __future__ import annotations
from dataclasses import dataclass, replace
import os
import os.path
from typing import Callable, Optional


def default_ignore(parentpath: str, dirname: str) -> bool:
    """Skips hidden folders such as ``.git``, ``.hg`` or ``.obsidian``."""
    return dirname.startswith('.')


def default_is_note(parentpath: str, filename: str) -> bool:
    return filename.endswith('.md')


@dataclass
class NotemanagerConf:
    """Settings for a single run of the tool.

    There is no config file; instances are built by the command-line interface from its arguments and the
    current working directory, or directly by callers of the Python API.
    """

    root: str
    """The folder that is searched (recursively) for notes. Sync commands also run here."""

    ignore: Callable[[str, str], bool] = default_ignore
    """Use this to indicate folders that should not be searched for notes.

    The first argument is the path to the directory containing the folder, and the second argument is
    the folder's name.

    If this function returns True for a folder, none of its children are visited. It is not called for
    files. The default ignores every folder whose name begins with a period (``.``), which covers ``.git``
    and other version control metadata directories.
    """

    is_note: Callable[[str, str], bool] = default_is_note
    """Decides which regular files count as notes. The first argument is the path to the directory containing
    the file, and the second argument is the filename.

    The default accepts filenames ending in ``.md``.
    """

    editor: Optional[str] = None
    """Command used to open a note, such as ``"vim"`` or ``"code --wait"``.

    If None, ``$VISUAL`` or ``$EDITOR`` is used; see :func:`notemanager.editor.editor_command`.
    """

    sync: bool = True
    """If False, the git commands are not run after editing a note."""

    sync_fail_fast: bool = True
    """If True, the first failing git command stops the sync. Otherwise all commands are attempted
    and the failures are reported together."""

    @classmethod
    def for_cwd(cls, **kwargs) -> NotemanagerConf:
        return cls(root=os.getcwd(), **kwargs)

    def standardize(self):
        return replace(self, root=os.path.realpath(self.root))

    def instantiate(self):
        from notemanager.api import Notemanager
        return Notemanager(self.standardize())
