"""Color helpers: Kelvin conversion, CSS color parsing and blending, contrast."""
from __future__ import annotations

import math
import re
from itertools import combinations
from typing import Iterable, Optional, Tuple

RGB = Tuple[int, int, int]

_HEX_PATTERN = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_RGB_PATTERN = re.compile(
    r"^rgba?\(\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)\s*(?:,\s*([\d.]+)\s*)?\)$"
)


def _channel(value: float) -> int:
    return int(round(max(0.0, min(255.0, value))))


def format_rgb(rgb: RGB) -> str:
    r, g, b = rgb
    return f"rgb({r}, {g}, {b})"


def kelvin_to_rgb(kelvin: float) -> str:
    """Approximate the RGB tint of a black body at ``kelvin`` degrees.

    Valid roughly for 1000K to 40000K.
    """

    temp = kelvin / 100.0

    if temp <= 66:
        red = 255.0
        green = 99.4708025861 * math.log(temp) - 161.1195681661
    else:
        red = 329.698727446 * ((temp - 60) ** -0.1332047592)
        green = 288.1221695283 * ((temp - 60) ** -0.0755148492)

    if temp >= 66:
        blue = 255.0
    elif temp <= 19:
        blue = 0.0
    else:
        blue = 138.5177312231 * math.log(temp - 10) - 305.0447927307

    return format_rgb((_channel(red), _channel(green), _channel(blue)))


def parse_color(value: str) -> Optional[RGB]:
    """Parse ``#rgb``, ``#rrggbb``, ``rgb()`` or ``rgba()``; None when unreadable."""

    text = value.strip()
    match = _HEX_PATTERN.match(text)
    if match:
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    match = _RGB_PATTERN.match(text)
    if match:
        return (
            _channel(float(match.group(1))),
            _channel(float(match.group(2))),
            _channel(float(match.group(3))),
        )
    return None


def interpolate_color(start: str, end: str, t: float) -> str:
    """Blend two colors channel by channel.

    Unparseable inputs fall back to whichever side is readable, holding the
    start color until ``t`` reaches 1.
    """

    a = parse_color(start)
    b = parse_color(end)
    if a is None and b is None:
        return end if t >= 1.0 else start
    if a is None:
        return format_rgb(b)  # type: ignore[arg-type]
    if b is None:
        return format_rgb(a)
    progress = max(0.0, min(1.0, t))
    return format_rgb(tuple(_channel(x + (y - x) * progress) for x, y in zip(a, b)))  # type: ignore[arg-type]


def relative_luminance(rgb: RGB) -> float:
    def _linear(channel: int) -> float:
        c = channel / 255.0
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = (_linear(channel) for channel in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(first: RGB, second: RGB) -> float:
    """WCAG contrast ratio between two colors, from 1.0 to 21.0."""

    lighter, darker = sorted((relative_luminance(first), relative_luminance(second)), reverse=True)
    return (lighter + 0.05) / (darker + 0.05)


def best_contrast(colors: Iterable[str]) -> Optional[float]:
    """Highest contrast ratio among parseable pairs, or None with fewer than two."""

    parsed = [rgb for rgb in (parse_color(color) for color in colors) if rgb is not None]
    if len(parsed) < 2:
        return None
    return max(contrast_ratio(a, b) for a, b in combinations(parsed, 2))


__all__ = [
    "RGB",
    "best_contrast",
    "contrast_ratio",
    "format_rgb",
    "interpolate_color",
    "kelvin_to_rgb",
    "parse_color",
    "relative_luminance",
]
