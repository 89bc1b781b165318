from subprocess import CompletedProcess
import pytest


@pytest.fixture
def editor_env(monkeypatch):
    monkeypatch.delenv('VISUAL', raising=False)
    monkeypatch.setenv('EDITOR', 'vim')


@pytest.fixture
def run(mocker):
    """Replaces subprocess.run, so neither the editor nor git is actually started."""
    return mocker.patch('subprocess.run', return_value=CompletedProcess([], 0, '', ''))
