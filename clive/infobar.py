"""Info bar and help overlay text."""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .state import AppState

from .types import Mode


@dataclass(frozen=True)
class InfoBarText:
    """Left and right halves of the info bar and how to colour the right one."""
    information: str
    mode: str
    style: str = "normal"  # normal | command | error | success


def build_infobar(state: "AppState") -> InfoBarText:
    """Command mode shows the typed line, a pending message wins over the
    file name, and otherwise it is the current path and "i of n"."""
    if state.mode == Mode.COMMAND:
        return InfoBarText(state.input.display, "Command", "command")

    msg = state.ui.message
    if msg is not None:
        return InfoBarText(msg.text, "Error" if msg.is_error else "Success",
                           "error" if msg.is_error else "success")

    coll = state.collection
    entry = coll.current()
    information = entry.path if entry else "No file selected"
    return InfoBarText(information, coll.position_text())


HELP_ROWS = [
    ("Esc OR q", "Quit"),
    ("Left Arrow OR k", "Previous image"),
    ("Right Arrow OR j", "Next image"),
    ("PageUp OR w", "Forward 10% of images"),
    ("PageDown OR b", "Backward 10% of images"),
    ("Home OR g", "First image"),
    ("End OR G", "Last image"),
    ("m", "Move image to destination folder (default is ./keep)"),
    ("c", "Copy image to destination folder (default is ./keep)"),
    ("Delete OR d", "Delete image from its location"),
    ("Up/Down OR +/-", "Zoom in / out"),
    ("Shift + Arrows", "Pan"),
    ("x", "Center image"),
    ("z OR Left Click", "Toggle actual size vs scaled image"),
    ("t", "Toggle information bar"),
    ("f OR F11", "Toggle fullscreen mode"),
    ("h OR ?", "Toggle help box"),
    (". (period)", "Repeat last action"),
    (": OR /", "Command mode (ng, sort, df, m, r, q, ?)"),
]


def help_text() -> List[str]:
    """The help table as fixed-width lines."""
    kw = max(len(k) for k, _ in HELP_ROWS + [("Key", "")])
    aw = max(len(a) for _, a in HELP_ROWS)
    rule = f"+-{'-' * kw}-+-{'-' * aw}-+"
    lines = [rule, f"| {'Key'.ljust(kw)} | {'Action'.ljust(aw)} |", rule]
    lines += [f"| {k.ljust(kw)} | {a.ljust(aw)} |" for k, a in HELP_ROWS]
    lines.append(rule)
    return lines
