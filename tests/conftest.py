"""Test configuration and fixtures."""
import json
from pathlib import Path

import pytest

from rofi_keys.utils import cmd_runner
from tests.utils.fake_subprocess import FakePopen, FakeSubprocess


@pytest.fixture(autouse=True)
def _reset_cmd_runner():
    """Never leak injected fakes between tests."""
    yield
    cmd_runner.reset_runner()
    cmd_runner.reset_spawner()


@pytest.fixture
def fake_popen():
    """Install a FakePopen as the process spawner (exits 0 by default)."""
    fake = FakePopen()
    cmd_runner.set_spawner(fake)
    return fake


@pytest.fixture
def fake_run():
    """Install a FakeSubprocess as the process runner."""
    fake = FakeSubprocess()
    cmd_runner.set_runner(fake)
    return fake


@pytest.fixture
def home_dir(tmp_path, monkeypatch):
    """Point HOME at a temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("ROFI_KEYS_CONFIG", raising=False)
    monkeypatch.delenv("ROFI_KEYS_ROFI", raising=False)
    return home


@pytest.fixture
def two_entry_config(tmp_path) -> Path:
    """A JSON config with a Firefox entry first and a terminal second."""
    data = {
        "theme": None,
        "menu_title": "Apps",
        "entries": [
            {"key": "f", "label": "Firefox", "command": "firefox"},
            {"key": "t", "label": "Terminal", "command": "xterm"},
        ],
    }
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data))
    return path
