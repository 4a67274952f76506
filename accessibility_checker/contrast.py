"""
Color parsing and WCAG contrast ratio computation.
"""

import math
import re
from typing import Optional, Tuple

RGB = Tuple[int, int, int]

# WCAG AA threshold for normal-size text.
MIN_CONTRAST_RATIO = 4.5
# Returned when either color cannot be parsed, so unresolved styles never fail.
NEUTRAL_CONTRAST_RATIO = 4.5

_HEX_PATTERN = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_RGB_PATTERN = re.compile(
    r"^rgba?\(\s*([^,\s)]+)\s*[,\s]\s*([^,\s)]+)\s*[,\s]\s*([^,\s)/]+)\s*(?:[,/]\s*([^,\s)]+)\s*)?\)$",
    re.IGNORECASE,
)


def _parse_channel(token: str) -> Optional[int]:
    """Parse an rgb() channel: integer 0-255 or percentage."""
    try:
        if token.endswith("%"):
            value = float(token[:-1]) * 255 / 100
        else:
            value = float(token)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return max(0, min(255, int(round(value))))


def _parse_alpha(token: Optional[str]) -> Optional[float]:
    if token is None:
        return 1.0
    try:
        if token.endswith("%"):
            alpha = float(token[:-1]) / 100
        else:
            alpha = float(token)
    except ValueError:
        return None
    return alpha if math.isfinite(alpha) else None


def _split_color(value: str) -> Optional[Tuple[RGB, float]]:
    """Return ((r, g, b), alpha) for hex or rgb()/rgba() strings."""
    if not value:
        return None
    text = value.strip()
    match = _HEX_PATTERN.match(text)
    if match:
        digits = match.group(1)
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
        return (r, g, b), alpha
    match = _RGB_PATTERN.match(text)
    if match:
        channels = [_parse_channel(match.group(i)) for i in (1, 2, 3)]
        alpha = _parse_alpha(match.group(4))
        if any(c is None for c in channels) or alpha is None:
            return None
        return (channels[0], channels[1], channels[2]), alpha
    return None


def parse_color(value: Optional[str]) -> Optional[RGB]:
    """Parse a hex or rgb()/rgba() color into an (r, g, b) tuple, or None."""
    parsed = _split_color(value or "")
    return parsed[0] if parsed else None


def is_transparent(value: Optional[str]) -> bool:
    """True for the `transparent` keyword or a color with zero alpha."""
    if not value:
        return False
    if value.strip().lower() == "transparent":
        return True
    parsed = _split_color(value)
    return parsed is not None and parsed[1] <= 0


def relative_luminance(rgb: RGB) -> float:
    """WCAG relative luminance of an sRGB color."""
    def linear(channel: int) -> float:
        c = channel / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = (linear(c) for c in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(background: Optional[str], foreground: Optional[str]) -> float:
    """Contrast ratio between two colors, from 1.0 up to 21.0.

    Falls back to NEUTRAL_CONTRAST_RATIO when either color is not a hex or
    rgb() value.
    """
    bg = parse_color(background)
    fg = parse_color(foreground)
    if bg is None or fg is None:
        return NEUTRAL_CONTRAST_RATIO

    lighter = max(relative_luminance(bg), relative_luminance(fg))
    darker = min(relative_luminance(bg), relative_luminance(fg))
    return (lighter + 0.05) / (darker + 0.05)


def meets_contrast(ratio: float, threshold: float = MIN_CONTRAST_RATIO) -> bool:
    return ratio >= threshold
