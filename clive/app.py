"""Application - main loop orchestrator.

The Application class coordinates one frame at a time:
- raylib input -> events (poll_events)
- events -> state changes (InputDispatcher)
- state -> pixels (Renderer)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import sys
import traceback

from .cli import Args, parse_args
from .config import (
    KEY_LEFT_SHIFT, KEY_RIGHT_SHIFT, TARGET_FPS, WATCHED_KEYS,
    WINDOW_H, WINDOW_TITLE, WINDOW_W,
)
from .errors import PatternError
from .input_handler import (
    ClickEvent, CloseEvent, Event, InputDispatcher, KeyEvent, ResizeEvent, TextEvent,
)
from .logging import get_frame, increment_frame, log, set_verbose
from .renderer import Renderer
from .rl_compat import RL_VERSION, init_window, rl
from .state import AppState, Collection, ViewState


def poll_events() -> List[Event]:
    """Translate this frame's raylib input into dispatcher events.

    Text comes before keys so a line typed and confirmed within one frame
    reaches the buffer before Enter.
    """
    events: List[Event] = []
    if rl.WindowShouldClose():
        events.append(CloseEvent())
        return events
    if rl.IsWindowResized():
        events.append(ResizeEvent(rl.GetScreenWidth(), rl.GetScreenHeight()))

    ch = rl.GetCharPressed()
    while ch > 0:
        events.append(TextEvent(chr(ch)))
        ch = rl.GetCharPressed()

    shift = rl.IsKeyDown(KEY_LEFT_SHIFT) or rl.IsKeyDown(KEY_RIGHT_SHIFT)
    for key in WATCHED_KEYS:
        if rl.IsKeyPressed(key) or rl.IsKeyPressedRepeat(key):
            events.append(KeyEvent(key, bool(shift)))

    if rl.IsMouseButtonReleased(rl.MOUSE_BUTTON_LEFT):
        pos = rl.GetMousePosition()
        events.append(ClickEvent(pos.x, pos.y))
    return events


@dataclass
class Application:
    """
    Main application orchestrator.

    Usage:
        app = Application(state)
        if app.initialize():
            app.run()
    """

    state: AppState = field(default_factory=AppState)
    renderer: Renderer = field(default_factory=Renderer)
    dispatcher: Optional[InputDispatcher] = None
    window_fullscreen: bool = False

    def __post_init__(self) -> None:
        if self.dispatcher is None:
            self.dispatcher = InputDispatcher(self.state)

    def initialize(self) -> bool:
        """Open the window. Returns False if the backend cannot start."""
        log(f"[INIT] Creating window {WINDOW_W}x{WINDOW_H} ({RL_VERSION})")
        try:
            rl.SetConfigFlags(rl.FLAG_WINDOW_RESIZABLE)
            init_window(WINDOW_W, WINDOW_H, WINDOW_TITLE)
            if not rl.IsWindowReady():
                raise RuntimeError("window not ready")
            rl.SetExitKey(0)  # Esc is a normal key here
            rl.SetTargetFPS(TARGET_FPS)
        except Exception as e:
            log(f"[INIT][CRITICAL] Failed to initialize window: {e!r}")
            log(f"[INIT][CRITICAL] Traceback:\n{traceback.format_exc()}")
            return False
        self._sync_fullscreen()
        return True

    def run(self) -> None:
        log("[APP] Starting main loop")
        try:
            while self.state.running:
                self._frame()
        finally:
            self._cleanup()

    def _frame(self) -> None:
        for event in poll_events():
            self.dispatcher.handle(event)
            if not self.state.running:
                return
        self._sync_fullscreen()
        self.state.ui.expire_message()
        self.renderer.draw_frame(self.state)
        increment_frame()

    def _sync_fullscreen(self) -> None:
        if self.state.ui.fullscreen != self.window_fullscreen:
            rl.ToggleFullscreen()
            self.window_fullscreen = self.state.ui.fullscreen
            log(f"[APP] Fullscreen {'on' if self.window_fullscreen else 'off'}")

    def _cleanup(self) -> None:
        log("[APP] Starting cleanup")
        self.renderer.unload()
        rl.CloseWindow()
        log(f"[APP] Cleanup complete, frames={get_frame()}")


def build_state(args: Args) -> AppState:
    """Discover the images named on the command line."""
    collection = Collection.load(
        args.paths,
        max_count=args.max_count,
        method=args.sort,
        reverse=args.reverse,
        dest_folder=args.dest_folder,
    )
    state = AppState(collection=collection, view=ViewState())
    state.ui.fullscreen = args.fullscreen
    if collection.is_empty:
        state.ui.error("No images found")
    return state


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    set_verbose(args.verbose)
    log("[MAIN] Starting application")
    try:
        state = build_state(args)
    except PatternError as e:
        sys.stderr.write(f"clive: {e}\n")
        return 2

    app = Application(state)
    if not app.initialize():
        return 1
    app.run()
    return 0
