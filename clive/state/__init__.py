"""State management submodules for clive."""

from .collection import Collection, RemovalResult
from .view import ViewState
from .ui import UIState, StatusMessage
from .input import InputState
from .app_state import AppState

__all__ = [
    'Collection',
    'RemovalResult',
    'ViewState',
    'UIState',
    'StatusMessage',
    'InputState',
    'AppState',
]
