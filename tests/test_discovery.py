from contextlib import nullcontext
import logging
import os
import pytest
from notemanager.discovery import discover
from notemanager.errors import DirectoryUnreadableError


class FakeEntry:
    def __init__(self, parent, name, kind):
        self.name = name
        self.path = os.path.join(parent, name)
        self.kind = kind

    def is_dir(self, follow_symlinks=True):
        if self.kind == 'broken':
            raise PermissionError(13, 'Permission denied', self.path)
        return self.kind == 'dir'

    def is_file(self, follow_symlinks=True):
        return self.kind == 'file'


def fake_scandir(tree):
    """Returns a scandir replacement for a dict of directory paths to lists of (name, kind) pairs.

    Kinds are 'file', 'dir', 'dangling' (neither a file nor a folder, like a broken symlink) and 'broken'
    (inspecting the entry raises PermissionError). Directories that are not keys of the dict raise
    PermissionError when read.
    """
    def scandir(path):
        if path not in tree:
            raise PermissionError(13, 'Permission denied', path)
        return nullcontext([FakeEntry(path, name, kind) for name, kind in tree[path]])
    return scandir


def test_discover(fs):
    fs.create_file('/notes/a.md')
    fs.create_file('/notes/b/c.md')
    fs.create_file('/notes/b/d.txt')
    fs.create_file('/notes/b/e/f/g.md')
    fs.create_file('/notes/readme.markdown')
    fs.create_file('/notes/notes.md.bak')
    paths = discover('/notes')
    assert sorted(paths) == ['a.md', 'b/c.md', 'b/e/f/g.md']


def test_discover_empty(fs):
    fs.create_dir('/notes')
    assert discover('/notes') == []


def test_discover_no_notes(fs):
    fs.create_file('/notes/todo.txt')
    fs.create_dir('/notes/empty/also-empty')
    assert discover('/notes') == []


def test_discover_ignores_hidden_folders(fs):
    fs.create_file('/notes/one.md')
    fs.create_file('/notes/.inbox.md')
    fs.create_file('/notes/.git/COMMIT_EDITMSG.md')
    fs.create_file('/notes/sub/.obsidian/workspace.md')
    fs.create_file('/notes/sub/three.md')
    assert sorted(discover('/notes')) == ['.inbox.md', 'one.md', 'sub/three.md']
    assert sorted(discover('/notes', ignore=lambda _1, _2: False)) == [
        '.git/COMMIT_EDITMSG.md', '.inbox.md', 'one.md', 'sub/.obsidian/workspace.md', 'sub/three.md']


def test_discover_ignore_only_applies_to_folders(fs):
    fs.create_file('/notes/drafts.md')
    fs.create_file('/notes/drafts/one.md')
    assert discover('/notes', ignore=lambda _, name: name.startswith('drafts')) == ['drafts.md']


def test_discover_custom_policies(fs):
    fs.create_file('/notes/one.md')
    fs.create_file('/notes/two.txt')
    fs.create_file('/notes/drafts/three.txt')
    assert discover('/notes', is_note=lambda _, name: name.endswith('.txt'),
                    ignore=lambda _, name: name == 'drafts') == ['two.txt']


def test_discover_directory_named_like_note(fs):
    fs.create_file('/notes/folder.md/inner.md')
    assert discover('/notes') == ['folder.md/inner.md']


def test_discover_symlinks(tmp_path):
    elsewhere = tmp_path / 'elsewhere'
    (elsewhere / 'shared').mkdir(parents=True)
    (elsewhere / 'real.md').write_text('')
    (elsewhere / 'shared' / 'shared.md').write_text('')
    vault = tmp_path / 'vault'
    vault.mkdir()
    (vault / 'link.md').symlink_to(elsewhere / 'real.md')
    (vault / 'broken.md').symlink_to(tmp_path / 'nowhere' / 'missing.md')
    (vault / 'shared').symlink_to(elsewhere / 'shared', target_is_directory=True)
    assert sorted(discover(str(vault))) == ['link.md', 'shared/shared.md']


def test_discover_skips_dangling_entries():
    tree = {'/vault': [('gone.md', 'dangling'), ('one.md', 'file')]}
    assert discover('/vault', scandir=fake_scandir(tree)) == ['one.md']


def test_discover_root_missing(fs):
    with pytest.raises(DirectoryUnreadableError) as excinfo:
        discover('/notes')
    assert excinfo.value.path == '/notes'
    assert isinstance(excinfo.value.cause, FileNotFoundError)
    assert '/notes' in excinfo.value.message


def test_discover_root_is_file(fs):
    fs.create_file('/notes.md')
    with pytest.raises(DirectoryUnreadableError):
        discover('/notes.md')


def test_discover_root_unreadable():
    with pytest.raises(DirectoryUnreadableError) as excinfo:
        discover('/vault', scandir=fake_scandir({}))
    assert isinstance(excinfo.value.cause, PermissionError)


def test_discover_skips_unreadable_entries(caplog):
    tree = {
        '/vault': [('one.md', 'file'), ('locked', 'dir'), ('weird.md', 'broken'), ('sub', 'dir')],
        '/vault/sub': [('two.md', 'file'), ('three.md', 'file')],
    }
    with caplog.at_level(logging.WARNING):
        paths = discover('/vault', scandir=fake_scandir(tree))
    assert paths == ['one.md', 'sub/two.md', 'sub/three.md']
    assert '/vault/locked' in caplog.text
    assert '/vault/weird.md' in caplog.text


def test_discover_order():
    tree = {
        '/vault': [('z.md', 'file'), ('sub', 'dir'), ('a.md', 'file'), ('other', 'dir')],
        '/vault/sub': [('m.md', 'file'), ('deeper', 'dir'), ('b.md', 'file')],
        '/vault/sub/deeper': [('y.md', 'file')],
        '/vault/other': [('c.md', 'file')],
    }
    assert discover('/vault', scandir=fake_scandir(tree)) == [
        'z.md', 'sub/m.md', 'sub/deeper/y.md', 'sub/b.md', 'a.md', 'other/c.md']


def test_discover_deep_nesting():
    depth = 3000
    tree = {}
    path = '/vault'
    for _ in range(depth):
        tree[path] = [('d', 'dir')]
        path = os.path.join(path, 'd')
    tree[path] = [('bottom.md', 'file')]
    paths = discover('/vault', scandir=fake_scandir(tree))
    assert paths == ['/'.join(['d'] * depth + ['bottom.md'])]
