"""Defines the exceptions raised by notemanager.

Everything derives from :class:`Error`, which the command-line interface reports as a failure.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence


class Error(Exception):
    """Base class for failures that should be reported to the user rather than crash the tool."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DirectoryUnreadableError(Error):
    """Raised when the root directory of a walk cannot be opened."""
    def __init__(self, message: str, path: str, cause: BaseException = None):
        super().__init__(message)
        self.path = path
        self.cause = cause


class NoMatchError(Error):
    """Raised when a pattern does not match any note."""
    def __init__(self, pattern: str):
        super().__init__(f'Could not find any match for pattern {pattern!r}')
        self.pattern = pattern


class EditorError(Error):
    """Raised when the editor cannot be started or exits with a nonzero status."""
    def __init__(self, message: str, command: Sequence[str] = (), returncode: Optional[int] = None,
                 cause: BaseException = None):
        super().__init__(message)
        self.command = list(command)
        self.returncode = returncode
        self.cause = cause


@dataclass
class CommandFailure:
    """Describes one external command that could not be run or returned a nonzero status."""

    command: List[str]

    returncode: Optional[int]
    """None if the command could not be started at all."""

    stderr: str = ''

    def __str__(self):
        line = ' '.join(self.command)
        if self.returncode is None:
            desc = f'`{line}` could not be started'
        else:
            desc = f'`{line}` exited with status {self.returncode}'
        if self.stderr.strip():
            desc += f': {self.stderr.strip()}'
        return desc


class SyncError(Error):
    """Raised when one or more of the git commands run after an edit fail."""
    def __init__(self, failures: List[CommandFailure]):
        super().__init__('Sync failed: ' + '; '.join(str(f) for f in failures))
        self.failures = failures
