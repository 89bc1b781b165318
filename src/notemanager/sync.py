"""Records and publishes changes to the notes folder using git.

After a note is edited, all changes in the folder are staged, committed with a message containing the
current local date and time, and pushed to the configured remote.
"""

from datetime import datetime
import logging
import subprocess
from typing import List, Optional

from notemanager.errors import CommandFailure, SyncError

logger = logging.getLogger(__name__)


def commit_message(now: datetime = None) -> str:
    now = now or datetime.now()
    return f'update {now.strftime("%d-%m-%y %H:%M")}'


def sync_commands(now: datetime = None) -> List[List[str]]:
    return [
        ['git', 'add', '.'],
        ['git', 'commit', '-m', commit_message(now)],
        ['git', 'push'],
    ]


def _run(command: List[str], cwd: str) -> Optional[CommandFailure]:
    logger.info('Running %s', command)
    try:
        result = subprocess.run(command, cwd=cwd, capture_output=True, text=True)
    except OSError as e:
        return CommandFailure(command, None, e.strerror or str(e))
    if result.returncode != 0:
        return CommandFailure(command, result.returncode, result.stderr or '')
    return None


def sync(root: str, fail_fast: bool = True, now: datetime = None) -> None:
    """Stages, commits and pushes every change in root.

    If fail_fast is True, the first command that fails stops the sync. Otherwise every command is run
    regardless. Either way, :exc:`notemanager.errors.SyncError` is raised listing the commands that failed.
    Nothing is retried.
    """
    failures = []
    for command in sync_commands(now):
        failure = _run(command, root)
        if failure:
            logger.warning('%s', failure)
            failures.append(failure)
            if fail_fast:
                break
    if failures:
        raise SyncError(failures)
