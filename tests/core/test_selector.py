import subprocess

import pytest

from rofi_keys.core.errors import PipeFailure, ProcessSpawnFailure
from rofi_keys.core.menu import Menu
from rofi_keys.core.selector import RofiSelector
from rofi_keys.utils import cmd_runner
from tests.utils.fake_subprocess import FakePopen


@pytest.fixture
def menu() -> Menu:
    menu = Menu(title="Apps")
    menu.add_entry("f", "Firefox", "firefox")
    menu.add_entry("t", "Terminal", "xterm")
    return menu


def test_bindings_are_one_based_positions(menu):
    assert RofiSelector(menu).bindings() == [(1, "f"), (2, "t")]


def test_build_args_without_theme(menu):
    assert RofiSelector(menu).build_args() == [
        "rofi", "-dmenu", "-i", "-p", "Apps", "-no-fork", "-markup-rows", "-no-custom",
        "-theme-str", 'configuration { matching: "regex"; }',
        "-kb-custom-1", "f", "-kb-custom-2", "t",
    ]


def test_build_args_with_theme_and_binary(menu):
    menu.theme = "/home/u/themes/x.rasi"
    args = RofiSelector(menu, binary="/opt/rofi").build_args()

    assert args[0] == "/opt/rofi"
    i = args.index("-theme")
    assert args[i + 1] == "/home/u/themes/x.rasi"
    assert i < args.index("-kb-custom-1")


@pytest.mark.parametrize("code,index", [(10, 1), (11, 2), (28, 19), (9, None), (1, None), (0, None), (-15, None), (None, None)])
def test_decode_exit_code(code, index):
    assert RofiSelector.decode_exit_code(code) == index


def test_resolve(menu):
    selector = RofiSelector(menu)
    assert selector.resolve(10) == "firefox"
    assert selector.resolve(11) == "xterm"
    # Index 3 has no entry
    assert selector.resolve(12) is None
    assert selector.resolve(0) is None


def test_select_pipes_menu_lines_and_decodes_exit_code(menu):
    fake = FakePopen(returncode=11)
    cmd_runner.set_spawner(fake)

    assert RofiSelector(menu).select() == "xterm"

    proc = fake.calls[0]
    assert proc.args[0] == "rofi"
    assert proc.input == "[f] Firefox\n[t] Terminal"
    assert proc.kwargs["stdin"] == subprocess.PIPE
    assert proc.kwargs["stderr"] == subprocess.DEVNULL


def test_select_accept_or_cancel_is_no_selection(menu):
    cmd_runner.set_spawner(FakePopen(returncode=1))
    assert RofiSelector(menu).select() is None


def test_select_missing_binary_raises_spawn_failure(menu):
    cmd_runner.set_spawner(FakePopen(spawn_error=FileNotFoundError(2, "No such file", "rofi")))
    with pytest.raises(ProcessSpawnFailure):
        RofiSelector(menu).select()


def test_select_broken_pipe_raises_pipe_failure(menu):
    fake = FakePopen(communicate_error=OSError(5, "I/O error"))
    cmd_runner.set_spawner(fake)
    with pytest.raises(PipeFailure):
        RofiSelector(menu).select()
    assert fake.calls[0].killed


def test_build_args_passes_empty_theme(menu):
    menu.theme = ""
    args = RofiSelector(menu).build_args()
    assert args[args.index("-theme") + 1] == ""
