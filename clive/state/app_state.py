"""Composite AppState - the single owner of everything the loop mutates."""

from __future__ import annotations
from dataclasses import dataclass, field

from .collection import Collection
from .input import InputState
from .ui import UIState
from .view import ViewState
from ..commands import Action, NoOp
from ..types import Mode


@dataclass
class AppState:
    """
    Combined application state.

    Only the dispatch loop touches it; the renderer reads it.
    """
    collection: Collection = field(default_factory=Collection)
    view: ViewState = field(default_factory=ViewState)
    input: InputState = field(default_factory=InputState)
    ui: UIState = field(default_factory=UIState)
    last_action: Action = field(default_factory=NoOp)

    @property
    def mode(self) -> Mode:
        return self.input.mode

    @mode.setter
    def mode(self, value: Mode) -> None:
        self.input.mode = value

    @property
    def dest_folder(self) -> str:
        return self.collection.dest_folder

    @dest_folder.setter
    def dest_folder(self, value: str) -> None:
        self.collection.dest_folder = value

    @property
    def running(self) -> bool:
        return not self.ui.quit_requested
