"""Renderer - handles all drawing operations.

Reads state and draws it. The only state it writes is what it learns while
drawing: image/window geometry for the view, and decode failures, which are
surfaced as messages.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional
import os

if TYPE_CHECKING:
    from .state import AppState

from .rl_compat import (
    rl, is_texture_valid,
    make_rect as RL_Rect, make_vec2 as RL_V2, make_color as RL_Color,
    draw_text as RL_DrawText, measure_text,
)
from .config import (
    BG_COLOR, ERROR_BG, FONT_SIZE, HELP_BG, INFOBAR_BG, INFOBAR_FG,
    INFOBAR_MODE_BG, INFOBAR_PADDING, LINE_HEIGHT, LINE_PADDING, SUCCESS_BG,
)
from .errors import DecodeError
from .image_utils import load_texture
from .infobar import build_infobar, help_text
from .logging import log
from .types import Mode, TextureInfo

_STYLE_BG = {
    "normal": INFOBAR_MODE_BG,
    "command": INFOBAR_MODE_BG,
    "error": ERROR_BG,
    "success": SUCCESS_BG,
}


@dataclass
class Renderer:
    """
    Handles all drawing operations.

    Usage:
        renderer = Renderer()
        renderer.draw_frame(state)
        ...
        renderer.unload()
    """
    current: Optional[TextureInfo] = None
    failed_path: Optional[str] = None

    # ═══════════════════════════════════════════════════════════════════════
    # Textures
    # ═══════════════════════════════════════════════════════════════════════

    def unload(self) -> None:
        if self.current and is_texture_valid(self.current.tex):
            rl.UnloadTexture(self.current.tex)
        self.current = None

    def sync_texture(self, state: "AppState") -> None:
        """Make the loaded texture match the current entry."""
        entry = state.collection.current()
        path = entry.path if entry else None
        if path is None:
            self.unload()
            self.failed_path = None
            return
        if (self.current and self.current.path == path) or self.failed_path == path:
            return
        self.unload()
        try:
            self.current = load_texture(path)
            self.failed_path = None
        except DecodeError as e:
            log(f"[RENDER][ERR] {e}")
            self.failed_path = path
            state.ui.error(f"Failed to load {os.path.basename(path)}: {e}")

    # ═══════════════════════════════════════════════════════════════════════
    # Frame
    # ═══════════════════════════════════════════════════════════════════════

    def draw_frame(self, state: "AppState") -> None:
        self.sync_texture(state)
        sw, sh = rl.GetScreenWidth(), rl.GetScreenHeight()
        if self.current:
            state.view.set_geometry(self.current.w, self.current.h, sw, sh)

        rl.BeginDrawing()
        rl.ClearBackground(RL_Color(BG_COLOR))
        if state.collection.is_empty:
            self.draw_blank(sw, sh)
        else:
            self.draw_image(state)
        if state.ui.show_infobar or state.mode == Mode.COMMAND or state.ui.message:
            self.draw_infobar(state, sw, sh)
        if state.mode == Mode.HELP:
            self.draw_help(sw, sh)
        rl.EndDrawing()

    def draw_image(self, state: "AppState") -> None:
        ti = self.current
        if not ti or not is_texture_valid(ti.tex):
            return
        v = state.view.to_params()
        rl.DrawTexturePro(
            ti.tex,
            RL_Rect(0, 0, ti.w, ti.h),
            RL_Rect(v.offx, v.offy, ti.w * v.scale, ti.h * v.scale),
            RL_V2(0, 0), 0.0, RL_Color((255, 255, 255, 255)),
        )

    def draw_blank(self, sw: int, sh: int) -> None:
        text = "No images found"
        size = FONT_SIZE * 2
        x = (sw - measure_text(text, size)) // 2
        RL_DrawText(text, x, sh // 2 - size, size, RL_Color(INFOBAR_FG))

    def draw_infobar(self, state: "AppState", sw: int, sh: int) -> None:
        text = build_infobar(state)
        bar_h = LINE_HEIGHT + LINE_PADDING * 2
        y = sh - bar_h
        rl.DrawRectangle(0, y, sw, bar_h, RL_Color(INFOBAR_BG))

        mode_w = measure_text(text.mode, FONT_SIZE) + INFOBAR_PADDING
        rl.DrawRectangle(sw - mode_w, y, mode_w, bar_h, RL_Color(_STYLE_BG[text.style]))
        RL_DrawText(text.mode, sw - mode_w + INFOBAR_PADDING // 2, y + LINE_PADDING + 2,
                    FONT_SIZE, RL_Color(INFOBAR_FG))

        info = text.information
        max_w = sw - mode_w - INFOBAR_PADDING
        # keep the tail of long paths, the file name matters most
        while len(info) > 4 and measure_text(info, FONT_SIZE) > max_w:
            info = "..." + info[4:]
        RL_DrawText(info, INFOBAR_PADDING // 2, y + LINE_PADDING + 2, FONT_SIZE, RL_Color(INFOBAR_FG))

    def draw_help(self, sw: int, sh: int) -> None:
        lines = help_text()
        w = max(measure_text(line, FONT_SIZE) for line in lines) + INFOBAR_PADDING * 2
        h = len(lines) * LINE_HEIGHT + INFOBAR_PADDING * 2
        x = max(0, (sw - w) // 2)
        y = max(0, (sh - h) // 2)
        rl.DrawRectangle(x, y, w, h, RL_Color(HELP_BG))
        for i, line in enumerate(lines):
            RL_DrawText(line, x + INFOBAR_PADDING, y + INFOBAR_PADDING + i * LINE_HEIGHT,
                        FONT_SIZE, RL_Color(INFOBAR_FG))
