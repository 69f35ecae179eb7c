"""Input Handler - the mode state machine.

Raw backend input arrives as small event objects. The active Mode decides
which transition method sees them: Normal maps keys to Actions, Command edits
a text buffer and hands it to the command language on Enter, Help only
listens for the keys that close it.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Optional, Tuple, Union

if TYPE_CHECKING:
    from .state import AppState

from .command_mode import (
    Directive, DestFolder, Help, Max, NewGlob, Quit as QuitDirective, Reverse,
    Sort, Unrecognized, parse_command,
)
from .commands import (
    Action, CenterImage, CopyTo, Delete, EnterCommandMode, Jump, MoveTo,
    Navigate, NoOp, PageJump, Pan, Quit, RepeatLast, ToggleActualSize,
    ToggleFullscreen, ToggleHelp, ToggleInfobar, Zoom,
)
from .config import (
    KEY_B, KEY_BACKSPACE, KEY_C, KEY_D, KEY_DELETE, KEY_DOWN, KEY_END,
    KEY_ENTER, KEY_EQUAL, KEY_ESCAPE, KEY_F, KEY_F11, KEY_G, KEY_H, KEY_HOME,
    KEY_J, KEY_K, KEY_KP_ADD, KEY_KP_ENTER, KEY_KP_SUBTRACT, KEY_LEFT, KEY_M,
    KEY_MINUS, KEY_PAGE_DOWN, KEY_PAGE_UP, KEY_PERIOD, KEY_Q, KEY_RIGHT,
    KEY_SEMICOLON, KEY_SLASH, KEY_T, KEY_UP, KEY_W, KEY_X, KEY_Z,
)
from .errors import CliveError, CommandError
from .logging import debug, log
from .types import Mode


# ═══════════════════════════════════════════════════════════════════════════
# Events
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class KeyEvent:
    """A key press (raylib key code)."""
    key: int
    shift: bool = False


@dataclass(frozen=True)
class TextEvent:
    """Typed text, already translated by the keyboard layout."""
    text: str


@dataclass(frozen=True)
class ClickEvent:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


@dataclass(frozen=True)
class CloseEvent:
    """Window close request; quits from every mode."""


Event = Union[KeyEvent, TextEvent, ClickEvent, ResizeEvent, CloseEvent]
KeyMap = Dict[Tuple[int, bool], Action]


def default_key_map() -> KeyMap:
    """Normal mode bindings, keyed by (key code, shift held)."""
    plain = {
        KEY_ESCAPE: Quit(),
        KEY_Q: Quit(),
        KEY_RIGHT: Navigate(1),
        KEY_J: Navigate(1),
        KEY_LEFT: Navigate(-1),
        KEY_K: Navigate(-1),
        KEY_PAGE_UP: PageJump(forward=True),
        KEY_W: PageJump(forward=True),
        KEY_PAGE_DOWN: PageJump(forward=False),
        KEY_B: PageJump(forward=False),
        KEY_HOME: Jump(to_last=False),
        KEY_G: Jump(to_last=False),
        KEY_END: Jump(to_last=True),
        KEY_M: MoveTo(),
        KEY_C: CopyTo(),
        KEY_DELETE: Delete(),
        KEY_D: Delete(),
        KEY_UP: Zoom(zoom_in=True),
        KEY_EQUAL: Zoom(zoom_in=True),
        KEY_KP_ADD: Zoom(zoom_in=True),
        KEY_DOWN: Zoom(zoom_in=False),
        KEY_MINUS: Zoom(zoom_in=False),
        KEY_KP_SUBTRACT: Zoom(zoom_in=False),
        KEY_X: CenterImage(),
        KEY_Z: ToggleActualSize(),
        KEY_T: ToggleInfobar(),
        KEY_F: ToggleFullscreen(),
        KEY_F11: ToggleFullscreen(),
        KEY_H: ToggleHelp(),
        KEY_PERIOD: RepeatLast(),
        KEY_SLASH: EnterCommandMode("/"),
    }
    shifted = {
        KEY_G: Jump(to_last=True),
        KEY_SEMICOLON: EnterCommandMode(":"),
        KEY_SLASH: ToggleHelp(),
        KEY_LEFT: Pan(dx=1),
        KEY_RIGHT: Pan(dx=-1),
        KEY_UP: Pan(dy=1),
        KEY_DOWN: Pan(dy=-1),
    }
    keymap: KeyMap = {(k, False): a for k, a in plain.items()}
    keymap.update({(k, True): a for k, a in shifted.items()})
    return keymap


HELP_CLOSE_KEYS = frozenset({KEY_H, KEY_ESCAPE})
CONFIRM_KEYS = frozenset({KEY_ENTER, KEY_KP_ENTER})


# ═══════════════════════════════════════════════════════════════════════════
# Dispatcher
# ═══════════════════════════════════════════════════════════════════════════

class InputDispatcher:
    """Routes events to the handler of the active mode and applies results."""

    def __init__(self, state: "AppState", key_map: Optional[KeyMap] = None):
        self.state = state
        self.key_map = key_map if key_map is not None else default_key_map()
        self._handlers: Dict[Mode, Callable[[Event], None]] = {
            Mode.NORMAL: self._handle_normal,
            Mode.COMMAND: self._handle_command,
            Mode.HELP: self._handle_help,
        }

    def handle(self, event: Event) -> None:
        """Process one event to completion."""
        if isinstance(event, CloseEvent):
            log("[INPUT] Window close requested")
            self.state.ui.quit_requested = True
            return
        if isinstance(event, ResizeEvent):
            v = self.state.view
            v.set_geometry(v.img_w, v.img_h, event.width, event.height)
            return
        self._handlers[self.state.mode](event)

    def lookup(self, event: KeyEvent) -> Optional[Action]:
        action = self.key_map.get((event.key, event.shift))
        if action is None and event.shift:
            action = self.key_map.get((event.key, False))
        return action

    # ─── Normal ──────────────────────────────────────────────────────────

    def _handle_normal(self, event: Event) -> None:
        if isinstance(event, KeyEvent):
            action = self.lookup(event)
            if action is not None:
                self.perform(action)
        elif isinstance(event, ClickEvent):
            self.perform(ToggleActualSize())

    def perform(self, action: Action) -> None:
        """Run one Normal mode action, recording it if it is repeatable."""
        state = self.state
        if isinstance(action, ToggleHelp):
            state.mode = Mode.HELP
            return
        if isinstance(action, EnterCommandMode):
            state.input.enter_command(action.prefix)
            return
        if isinstance(action, RepeatLast):
            action = state.last_action
            if isinstance(action, NoOp):
                debug("[INPUT] Nothing to repeat")
                return
            log(f"[INPUT] Repeating {action!r}")

        action = action.resolve(state)
        if not action.can_execute(state):
            state.ui.error("No images")
            return
        try:
            done = action.execute(state)
        except CliveError as e:
            log(f"[INPUT][ERR] {type(action).__name__}: {e}")
            state.ui.error(f"Failed: {e}")
            return
        if done and action.repeatable:
            state.last_action = action

    # ─── Help ────────────────────────────────────────────────────────────

    def _handle_help(self, event: Event) -> None:
        if not isinstance(event, KeyEvent):
            return
        if event.key in HELP_CLOSE_KEYS or (event.key == KEY_SLASH and event.shift):
            self.state.mode = Mode.NORMAL
        elif event.key == KEY_Q:
            self.perform(Quit())

    # ─── Command ─────────────────────────────────────────────────────────

    def _handle_command(self, event: Event) -> None:
        inp = self.state.input
        if isinstance(event, TextEvent):
            inp.append(event.text)
        elif isinstance(event, KeyEvent):
            if event.key in CONFIRM_KEYS:
                self._confirm()
            elif event.key == KEY_ESCAPE:
                inp.leave_command()
                debug("[INPUT] Command cancelled")
            elif event.key == KEY_BACKSPACE:
                inp.backspace()

    def _confirm(self) -> None:
        line = self.state.input.leave_command()
        try:
            directive = parse_command(line)
        except CommandError as e:
            log(f"[CMD][ERR] {line!r}: {e}")
            self.state.ui.error(f"Error: {e}")
            return
        if directive is not None:
            self.apply_directive(directive)

    def apply_directive(self, directive: Directive) -> None:
        """Carry out a parsed Command mode directive."""
        state = self.state
        coll = state.collection
        log(f"[CMD] {directive!r}")

        if isinstance(directive, Unrecognized):
            token = directive.text.split()[0]
            state.ui.error(f'Error: "{token}" is not a command')
            return

        if isinstance(directive, QuitDirective):
            state.ui.quit_requested = True
            return

        if isinstance(directive, Help):
            state.mode = Mode.HELP
            return

        if isinstance(directive, DestFolder):
            state.dest_folder = os.path.expandvars(os.path.expanduser(directive.path))
            state.ui.notify(f"destination folder set to {state.dest_folder}")
            return

        before = coll.current()
        before_path = before.path if before else None
        try:
            if isinstance(directive, NewGlob):
                coll.reglob(directive.pattern)
            elif isinstance(directive, Sort):
                coll.resort(directive.method, refresh=True)
            elif isinstance(directive, Reverse):
                coll.reverse()
            elif isinstance(directive, Max):
                coll.set_max(directive.count)
        except CliveError as e:
            log(f"[CMD][ERR] {e}")
            state.ui.error(f"Error: {e}")
            return
        after = coll.current()
        if (after.path if after else None) != before_path:
            state.view.on_navigate()
