"""View state - zoom, pan and the fit/actual-size toggle."""

from __future__ import annotations
from dataclasses import dataclass

from ..config import (
    KEEP_VIEW_ON_NAVIGATE,
    MAX_ZOOM, MIN_ZOOM, PAN_MIN_VISIBLE_FRAC, ZOOM_STEP,
)
from ..types import ViewParams
from ..view_math import clamp, compute_fit_scale, pan_limit


@dataclass
class ViewState:
    """
    Display transform for the current image.

    ``zoom`` multiplies the baseline scale, which is 1.0 in actual-size mode
    and the fit-to-window scale otherwise. ``pan_x``/``pan_y`` move the image
    centre away from the screen centre, in screen pixels. Nothing here
    fails: out-of-range input is clamped.
    """
    zoom: float = 1.0
    pan_x: float = 0.0
    pan_y: float = 0.0
    actual_size: bool = False
    img_w: int = 0
    img_h: int = 0
    screen_w: int = 0
    screen_h: int = 0
    keep_on_navigate: bool = KEEP_VIEW_ON_NAVIGATE

    @property
    def base_scale(self) -> float:
        if self.actual_size:
            return 1.0
        return compute_fit_scale(self.img_w, self.img_h, self.screen_w, self.screen_h)

    @property
    def scale(self) -> float:
        """Effective image-to-screen scale."""
        return self.base_scale * self.zoom

    def set_geometry(self, img_w: int, img_h: int, screen_w: int, screen_h: int) -> None:
        """Called by the renderer when the image or window size changes."""
        self.img_w, self.img_h = img_w, img_h
        self.screen_w, self.screen_h = screen_w, screen_h
        self._clamp_pan()

    def _clamp_pan(self) -> None:
        s = self.scale
        lx = pan_limit(self.img_w * s, self.screen_w, PAN_MIN_VISIBLE_FRAC)
        ly = pan_limit(self.img_h * s, self.screen_h, PAN_MIN_VISIBLE_FRAC)
        self.pan_x = clamp(self.pan_x, -lx, lx)
        self.pan_y = clamp(self.pan_y, -ly, ly)

    def zoom_in(self) -> None:
        self.zoom = clamp(self.zoom * ZOOM_STEP, MIN_ZOOM, MAX_ZOOM)
        self._clamp_pan()

    def zoom_out(self) -> None:
        self.zoom = clamp(self.zoom / ZOOM_STEP, MIN_ZOOM, MAX_ZOOM)
        self._clamp_pan()

    def pan(self, dx: float, dy: float) -> None:
        self.pan_x += dx
        self.pan_y += dy
        self._clamp_pan()

    def toggle_actual_size(self) -> None:
        self.actual_size = not self.actual_size
        self.zoom = 1.0
        self._clamp_pan()

    def center(self) -> None:
        self.pan_x = 0.0
        self.pan_y = 0.0

    def on_navigate(self) -> None:
        """Reset hook for cursor changes; the actual-size preference always survives."""
        if self.keep_on_navigate:
            return
        self.zoom = 1.0
        self.center()

    def to_params(self) -> ViewParams:
        """Top-left placement of the image for drawing."""
        s = self.scale
        return ViewParams(
            scale=s,
            offx=(self.screen_w - self.img_w * s) / 2.0 + self.pan_x,
            offy=(self.screen_h - self.img_h * s) / 2.0 + self.pan_y,
        )

