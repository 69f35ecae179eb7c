"""Command Pattern for Normal mode actions.

Each key in Normal mode maps to one Action. Actions are plain frozen
dataclasses so the most recent repeatable one can be stored as LastAction and
replayed with exactly the same parameters.
"""

from __future__ import annotations
import os
from abc import ABC
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .state import AppState

from . import config as cfg
from .config import PAN_STEP_PX
from .logging import log


class Action(ABC):
    """Base class for all Normal mode actions."""

    repeatable = False
    needs_image = False

    def resolve(self, state: "AppState") -> Action:
        """Bind parameters that depend on the state at key-press time."""
        return self

    def can_execute(self, state: "AppState") -> bool:
        """Check if the action applies. Override for guards."""
        return not (self.needs_image and state.collection.is_empty)

    def execute(self, state: "AppState") -> bool:
        """Execute the action. Returns True if something happened."""
        return False


@dataclass(frozen=True)
class NoOp(Action):
    """Nothing recorded yet."""


# ═══════════════════════════════════════════════════════════════════════════
# Navigation
# ═══════════════════════════════════════════════════════════════════════════

def _moved(state: "AppState", before: int) -> bool:
    if state.collection.index != before:
        state.view.on_navigate()
        return True
    return False


@dataclass(frozen=True)
class Navigate(Action):
    """Move the cursor by delta, clamped to the ends."""
    delta: int = 1
    repeatable = True
    needs_image = True

    def execute(self, state: "AppState") -> bool:
        before = state.collection.index
        state.collection.advance(self.delta)
        log(f"[CMD] Navigate {self.delta:+d}: {before} -> {state.collection.index}")
        _moved(state, before)
        return True


@dataclass(frozen=True)
class PageJump(Action):
    """Skip by 10% of the images; resolves to a fixed Navigate."""
    forward: bool = True
    needs_image = True

    def resolve(self, state: "AppState") -> Action:
        step = state.collection.page_size()
        return Navigate(step if self.forward else -step)


@dataclass(frozen=True)
class Jump(Action):
    """Go to the first or the last image."""
    to_last: bool = False
    repeatable = True
    needs_image = True

    def execute(self, state: "AppState") -> bool:
        before = state.collection.index
        if self.to_last:
            state.collection.jump_last()
        else:
            state.collection.jump_first()
        _moved(state, before)
        return True


# ═══════════════════════════════════════════════════════════════════════════
# View
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Zoom(Action):
    zoom_in: bool = True
    needs_image = True

    def execute(self, state: "AppState") -> bool:
        if self.zoom_in:
            state.view.zoom_in()
        else:
            state.view.zoom_out()
        return True


@dataclass(frozen=True)
class Pan(Action):
    """Pan by whole steps; dx/dy are in units of PAN_STEP_PX."""
    dx: int = 0
    dy: int = 0
    needs_image = True

    def execute(self, state: "AppState") -> bool:
        state.view.pan(self.dx * PAN_STEP_PX, self.dy * PAN_STEP_PX)
        return True


@dataclass(frozen=True)
class CenterImage(Action):
    needs_image = True

    def execute(self, state: "AppState") -> bool:
        state.view.center()
        return True


@dataclass(frozen=True)
class ToggleActualSize(Action):
    needs_image = True

    def execute(self, state: "AppState") -> bool:
        state.view.toggle_actual_size()
        return True


# ═══════════════════════════════════════════════════════════════════════════
# File actions
# ═══════════════════════════════════════════════════════════════════════════

def _after_removal(state: "AppState") -> None:
    state.collection.remove_current()
    state.view.on_navigate()


@dataclass(frozen=True)
class MoveTo(Action):
    """Move the current image into dest (the destination folder when None)."""
    dest: Optional[str] = None
    repeatable = True
    needs_image = True

    def resolve(self, state: "AppState") -> Action:
        return self if self.dest else MoveTo(state.dest_folder)

    def execute(self, state: "AppState") -> bool:
        entry = state.collection.current()
        state.collection.fs.move(entry.path, self.dest)
        _after_removal(state)
        state.ui.notify(f"moved {entry.path} successfully to {self.dest}")
        return True


@dataclass(frozen=True)
class CopyTo(Action):
    """Copy the current image into dest (the destination folder when None)."""
    dest: Optional[str] = None
    repeatable = True
    needs_image = True

    def resolve(self, state: "AppState") -> Action:
        return self if self.dest else CopyTo(state.dest_folder)

    def execute(self, state: "AppState") -> bool:
        entry = state.collection.current()
        target = state.collection.fs.copy(entry.path, self.dest)
        if cfg.REMOVE_AFTER_COPY:
            _after_removal(state)
        state.ui.notify(f"copied image to {target} successfully")
        return True


@dataclass(frozen=True)
class Delete(Action):
    repeatable = True
    needs_image = True

    def execute(self, state: "AppState") -> bool:
        entry = state.collection.current()
        state.collection.fs.delete(entry.path)
        _after_removal(state)
        state.ui.notify(f"deleted {os.path.basename(entry.path)} successfully")
        return True


# ═══════════════════════════════════════════════════════════════════════════
# UI toggles and mode changes
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ToggleInfobar(Action):
    def execute(self, state: "AppState") -> bool:
        state.ui.toggle_infobar()
        return True


@dataclass(frozen=True)
class ToggleFullscreen(Action):
    def execute(self, state: "AppState") -> bool:
        state.ui.toggle_fullscreen()
        return True


@dataclass(frozen=True)
class ToggleHelp(Action):
    """Handled by the dispatcher: it changes the mode."""


@dataclass(frozen=True)
class EnterCommandMode(Action):
    """Handled by the dispatcher: it changes the mode."""
    prefix: str = ":"


@dataclass(frozen=True)
class RepeatLast(Action):
    """Handled by the dispatcher: replays state.last_action."""


@dataclass(frozen=True)
class Quit(Action):
    def execute(self, state: "AppState") -> bool:
        log("[CMD] Quit requested")
        state.ui.quit_requested = True
        return True
