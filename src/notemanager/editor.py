"""Opens notes in the user's text editor."""

import logging
import os
import shlex
import shutil
import subprocess
from typing import List

from notemanager.errors import EditorError

logger = logging.getLogger(__name__)

FALLBACK_EDITORS = ('nano', 'vim', 'vi')


def editor_command(editor: str = None) -> List[str]:
    """Returns the command (as a list of arguments) to use for editing a file.

    The first of these that is set is used: the editor argument, ``$VISUAL``, ``$EDITOR``. Each is split
    like a shell command line, so values such as ``code --wait`` work. If none are set, the first of
    :data:`FALLBACK_EDITORS` found on the ``PATH`` is used.

    Raises :exc:`notemanager.errors.EditorError` if no editor can be found.
    """
    for value in (editor, os.environ.get('VISUAL'), os.environ.get('EDITOR')):
        if value and value.strip():
            return shlex.split(value)
    for name in FALLBACK_EDITORS:
        found = shutil.which(name)
        if found:
            return [found]
    raise EditorError('No editor found. Set $VISUAL or $EDITOR, or pass --editor.')


def edit_file(path: str, editor: str = None) -> None:
    """Opens path in an editor and waits for the editor to exit.

    Raises :exc:`notemanager.errors.EditorError` if the editor cannot be started or exits with a nonzero status.
    """
    command = editor_command(editor) + [path]
    logger.info('Running %s', command)
    try:
        result = subprocess.run(command)
    except OSError as e:
        raise EditorError(f'Could not start editor {command[0]!r}: {e.strerror or e}', command, cause=e)
    if result.returncode != 0:
        raise EditorError(f'Editor {command[0]!r} exited with status {result.returncode}',
                          command, returncode=result.returncode)
