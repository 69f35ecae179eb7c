"""Pure view calculation functions - no side effects, no state mutation."""

from __future__ import annotations


def clamp(v: float, a: float, b: float) -> float:
    """Clamp value v to range [a, b]."""
    return a if v < a else b if v > b else v


def compute_fit_scale(img_w: int, img_h: int, screen_w: int, screen_h: int) -> float:
    """Scale that fits the image inside the screen without upscaling.

    Args:
        img_w: Image width in pixels.
        img_h: Image height in pixels.
        screen_w: Screen width in pixels.
        screen_h: Screen height in pixels.

    Returns:
        1.0 when the image already fits (or sizes are unknown), otherwise the
        largest scale that shows the whole image.
    """
    if img_w <= 0 or img_h <= 0 or screen_w <= 0 or screen_h <= 0:
        return 1.0
    if img_w <= screen_w and img_h <= screen_h:
        return 1.0
    return min(screen_w / img_w, screen_h / img_h)


def pan_limit(displayed: float, screen: float, min_visible_frac: float) -> float:
    """Largest centre offset that keeps part of the image on screen.

    With the image centred at ``screen/2 + p``, its overlap with the screen is
    ``(screen + displayed)/2 - |p|`` (capped by the smaller of the two). The
    limit keeps that overlap at ``min_visible_frac`` of the smaller size.

    Args:
        displayed: Displayed image extent along one axis.
        screen: Screen extent along the same axis.
        min_visible_frac: Fraction that must stay visible (0.0-1.0).

    Returns:
        Non-negative bound for ``|p|``.
    """
    if displayed <= 0 or screen <= 0:
        return 0.0
    keep = min_visible_frac * min(displayed, screen)
    return max(0.0, (screen + displayed) / 2.0 - keep)
