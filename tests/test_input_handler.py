"""Mode state machine: key map, Command mode editing, Help, LastAction."""

import os

import pytest

from clive import config
from clive.commands import CopyTo, Delete, Jump, MoveTo, Navigate, NoOp
from clive.input_handler import (
    ClickEvent, CloseEvent, InputDispatcher, KeyEvent, ResizeEvent, TextEvent,
)
from clive.types import Mode


def _press(d, key, shift=False):
    d.handle(KeyEvent(key, shift))


def _type_command(d, line, prefix_key=config.KEY_SEMICOLON):
    """Open Command mode the way raylib reports it, type line, press Enter."""
    d.handle(TextEvent(":"))
    _press(d, prefix_key, shift=True)
    d.handle(TextEvent(line))
    _press(d, config.KEY_ENTER)


@pytest.fixture
def five(app_state, make_image):
    for name in "abcde":
        make_image(f"{name}.png")
    state = app_state()
    return state, InputDispatcher(state)


def test_navigation_keys(five):
    state, d = five
    _press(d, config.KEY_RIGHT)
    _press(d, config.KEY_J)
    assert state.collection.index == 2
    _press(d, config.KEY_K)
    assert state.collection.index == 1
    _press(d, config.KEY_G, shift=True)
    assert state.collection.index == 4
    _press(d, config.KEY_HOME)
    assert state.collection.index == 0
    assert state.last_action == Jump(to_last=False)


def test_page_jump_is_recorded_as_plain_navigation(five):
    state, d = five
    _press(d, config.KEY_W)
    assert state.collection.index == 1
    assert state.last_action == Navigate(1)


def test_quit_keys(five):
    state, d = five
    _press(d, config.KEY_Q)
    assert not state.running


def test_view_keys_do_not_replace_last_action(five):
    state, d = five
    _press(d, config.KEY_RIGHT)
    _press(d, config.KEY_UP)
    _press(d, config.KEY_RIGHT, shift=True)
    _press(d, config.KEY_T)
    _press(d, config.KEY_Z)
    assert state.last_action == Navigate(1)
    assert not state.ui.show_infobar
    assert state.view.actual_size


def test_navigation_resets_the_view(five):
    state, d = five
    _press(d, config.KEY_UP)
    assert state.view.zoom > 1.0
    _press(d, config.KEY_RIGHT)
    assert state.view.zoom == 1.0


def test_click_toggles_actual_size(five):
    state, d = five
    d.handle(ClickEvent(10, 10))
    assert state.view.actual_size


def test_resize_updates_geometry(five):
    state, d = five
    d.handle(ResizeEvent(640, 480))
    assert (state.view.screen_w, state.view.screen_h) == (640, 480)


def test_repeat_replays_navigation(five):
    state, d = five
    _press(d, config.KEY_RIGHT)
    _press(d, config.KEY_PERIOD)
    _press(d, config.KEY_PERIOD)
    assert state.collection.index == 3


def test_repeat_with_nothing_recorded_is_harmless(five):
    state, d = five
    _press(d, config.KEY_PERIOD)
    assert state.collection.index == 0
    assert state.last_action == NoOp()
    assert state.ui.message is None


def test_delete_removes_file_and_entry(five, tmp_path):
    state, d = five
    _press(d, config.KEY_D)
    assert not os.path.exists(tmp_path / "a.png")
    assert len(state.collection) == 4
    assert state.collection.current().name == "b.png"
    assert state.last_action == Delete()
    assert state.ui.message.text == "deleted a.png successfully"


def test_move_binds_destination_at_key_press(five, tmp_path):
    state, d = five
    dest = state.dest_folder
    _press(d, config.KEY_M)
    assert os.path.exists(os.path.join(dest, "a.png"))
    assert state.last_action == MoveTo(dest)
    assert len(state.collection) == 4


def test_copy_keeps_the_entry(five, tmp_path):
    state, d = five
    _press(d, config.KEY_C)
    assert os.path.exists(os.path.join(state.dest_folder, "a.png"))
    assert os.path.exists(tmp_path / "a.png")
    assert len(state.collection) == 5
    assert state.last_action == CopyTo(state.dest_folder)


def test_copy_can_remove_from_view(five, monkeypatch):
    monkeypatch.setattr(config, "REMOVE_AFTER_COPY", True)
    state, d = five
    _press(d, config.KEY_C)
    assert len(state.collection) == 4


def test_failed_move_keeps_entry_and_last_action(five, tmp_path):
    state, d = five
    _press(d, config.KEY_RIGHT)
    os.makedirs(state.dest_folder)
    with open(os.path.join(state.dest_folder, "b.png"), "wb"):
        pass
    _press(d, config.KEY_M)
    assert len(state.collection) == 5
    assert state.collection.current().name == "b.png"
    assert os.path.exists(tmp_path / "b.png")
    assert state.last_action == Navigate(1)
    assert state.ui.message.is_error


def test_empty_collection_reports_no_images(app_state):
    state = app_state("*.png")
    d = InputDispatcher(state)
    _press(d, config.KEY_RIGHT)
    _press(d, config.KEY_D)
    assert state.ui.message.text == "No images"
    assert state.last_action == NoOp()


# ─── Command mode ────────────────────────────────────────────────────────

def test_colon_enters_command_mode_without_echo(five):
    state, d = five
    d.handle(TextEvent(":"))
    _press(d, config.KEY_SEMICOLON, shift=True)
    assert state.mode == Mode.COMMAND
    assert state.input.display == ":"


def test_slash_enters_command_mode(five):
    state, d = five
    _press(d, config.KEY_SLASH)
    d.handle(TextEvent("/max 2"))
    assert state.input.buffer == "max 2"
    _press(d, config.KEY_ENTER)
    assert len(state.collection) == 2


def test_command_mode_editing(five):
    state, d = five
    _press(d, config.KEY_SEMICOLON, shift=True)
    d.handle(TextEvent("maxx"))
    _press(d, config.KEY_BACKSPACE)
    assert state.input.buffer == "max"
    _press(d, config.KEY_ESCAPE)
    assert state.mode == Mode.NORMAL
    assert state.input.buffer == ""
    assert state.running


def test_keys_never_quit_from_command_mode(five):
    state, d = five
    _press(d, config.KEY_SEMICOLON, shift=True)
    d.handle(TextEvent("q"))
    _press(d, config.KEY_Q)
    assert state.running
    assert state.mode == Mode.COMMAND
    assert state.input.buffer == "q"


def test_quit_command(five):
    state, d = five
    _type_command(d, "quit")
    assert not state.running


def test_close_event_quits_from_any_mode(five):
    state, d = five
    _press(d, config.KEY_SEMICOLON, shift=True)
    d.handle(CloseEvent())
    assert not state.running


def test_unknown_command_shows_error(five):
    state, d = five
    _type_command(d, "xyz 1")
    assert state.mode == Mode.NORMAL
    assert state.ui.message.is_error
    assert state.ui.message.text == 'Error: "xyz" is not a command'


def test_bad_argument_shows_error(five):
    state, d = five
    _type_command(d, "max -1")
    assert state.ui.message.is_error
    assert len(state.collection) == 5


def test_blank_command_just_leaves(five):
    state, d = five
    _type_command(d, "   ")
    assert state.mode == Mode.NORMAL
    assert state.ui.message is None


def test_destfolder_command(five, tmp_path):
    state, d = five
    _type_command(d, f"df {tmp_path / 'other dir'}")
    assert state.dest_folder == str(tmp_path / "other dir")
    assert not state.ui.message.is_error


def test_sort_and_reverse_commands(five):
    state, d = five
    _type_command(d, "reverse")
    assert state.collection.current().name == "a.png"
    assert state.collection.visible[0].name == "e.png"
    _type_command(d, "sort alphabetical")
    assert state.collection.visible[0].name == "e.png"


def test_newglob_failure_keeps_images(five, tmp_path):
    state, d = five
    _type_command(d, f"ng {tmp_path / '*.gif'}")
    assert state.ui.message.is_error
    assert len(state.collection) == 5


def test_newglob_replaces_images(five, make_image, tmp_path):
    state, d = five
    make_image("deep/z.png")
    _type_command(d, f"newglob {tmp_path / 'deep'}")
    assert [e.name for e in state.collection.visible] == ["z.png"]


def test_repeat_uses_destination_recorded_at_first_use(five, tmp_path):
    state, d = five
    first = state.dest_folder
    _press(d, config.KEY_M)
    _type_command(d, f"df {tmp_path / 'second'}")
    _press(d, config.KEY_PERIOD)
    assert os.path.exists(os.path.join(first, "a.png"))
    assert os.path.exists(os.path.join(first, "b.png"))
    assert not os.path.exists(tmp_path / "second")
    assert state.last_action == MoveTo(first)


# ─── Help mode ───────────────────────────────────────────────────────────

@pytest.mark.parametrize("key,shift", [
    (config.KEY_H, False),
    (config.KEY_ESCAPE, False),
    (config.KEY_SLASH, True),
])
def test_help_closes(five, key, shift):
    state, d = five
    _press(d, config.KEY_H)
    assert state.mode == Mode.HELP
    _press(d, key, shift)
    assert state.mode == Mode.NORMAL
    assert state.running


def test_help_ignores_other_keys(five):
    state, d = five
    _press(d, config.KEY_SLASH, shift=True)
    _press(d, config.KEY_RIGHT)
    _press(d, config.KEY_D)
    assert state.mode == Mode.HELP
    assert state.collection.index == 0
    assert len(state.collection) == 5


def test_q_quits_from_help(five):
    state, d = five
    _type_command(d, "help")
    assert state.mode == Mode.HELP
    _press(d, config.KEY_Q)
    assert not state.running
