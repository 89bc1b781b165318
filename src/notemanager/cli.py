"""Command-line interface for notemanager."""


import argparse
import json
import logging
import os.path
import sys
from terminaltables import AsciiTable
from notemanager.api import Notemanager
from notemanager.conf import NotemanagerConf
from notemanager.errors import Error
from notemanager.selection import rank


def _list(args, nm: Notemanager) -> int:
    paths = nm.notes()
    if args.json:
        print(json.dumps(paths))
    elif args.table:
        data = [('Filename', 'Folder')]
        for path in paths:
            folder, filename = os.path.split(path)
            data.append((filename, folder or '.'))
        print(AsciiTable(data).table)
    else:
        for path in paths:
            print(path)
    return 0


def _edit(args, nm: Notemanager) -> int:
    pattern = args.pattern[0]
    found = nm.edit(pattern,
                    before_edit=lambda path: print(f'Editing {path}', flush=True),
                    before_sync=lambda path: print(f'File {path} updated, Syncing...', flush=True))
    if len(found) > 1:
        if args.rank:
            found = rank(found, pattern)
        print('\n'.join(found))
    return 0


def _sync(args, nm: Notemanager) -> int:
    nm.sync()
    return 0


def argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='notemanager',
        description='Find, edit and sync the Markdown notes under the current directory.')
    parser.set_defaults(func=None, editor=None, no_sync=False, keep_going=False)
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Log more details to stderr. Repeat for even more.')

    subs = parser.add_subparsers(title='Commands')

    p_list = subs.add_parser(
        'list',
        help='Print the path of every note in the current directory and its subdirectories. Folders '
             'whose names begin with a period, such as .git, are skipped.')
    p_list_formats = p_list.add_mutually_exclusive_group()
    p_list_formats.add_argument('-j', '--json', action='store_true', help='Output as a JSON array of paths.')
    p_list_formats.add_argument('-t', '--table', action='store_true', help='Format output as a table.')
    p_list.set_defaults(func=_list)

    p_edit = subs.add_parser(
        'edit',
        help='Open the note whose path fuzzy-matches the pattern in your editor, then commit and push the '
             'current directory with git. If more than one note matches, the matches are printed and '
             'nothing is edited.')
    p_edit.add_argument('pattern', nargs=1,
                        help='Characters that must appear, in order, in the path of the note. Matching ignores '
                             'case unless the pattern contains an uppercase letter.')
    p_edit.add_argument('-e', '--editor',
                        help='Editor command to use. Defaults to $VISUAL, then $EDITOR.')
    p_edit.add_argument('--no-sync', action='store_true', help='Do not run git after editing.')
    p_edit.add_argument('-k', '--keep-going', action='store_true',
                        help='Run every git command even if an earlier one fails.')
    p_edit.add_argument('-r', '--rank', action='store_true',
                        help='When several notes match, print the best matches first.')
    p_edit.set_defaults(func=_edit)

    p_sync = subs.add_parser(
        'sync',
        help='Stage all changes in the current directory, commit them with a timestamped message, and push.')
    p_sync.add_argument('-k', '--keep-going', action='store_true',
                        help='Run every git command even if an earlier one fails.')
    p_sync.set_defaults(func=_sync)

    return parser


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    parser = argparser()
    args = parser.parse_args(args)
    if not args.func:
        parser.print_help()
        return 1
    logging.basicConfig(level=logging.WARNING - 10 * min(args.verbose, 2),
                        format='%(levelname)s %(name)s: %(message)s')
    nm = NotemanagerConf.for_cwd(editor=args.editor,
                                 sync=not args.no_sync,
                                 sync_fail_fast=not args.keep_going).instantiate()
    try:
        return args.func(args, nm)
    except Error as e:
        print(f'error: {e.message}', file=sys.stderr)
        return 1
