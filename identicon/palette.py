"""Foreground / background selection and hex colour parsing."""

from __future__ import annotations

from collections.abc import Sequence
from numbers import Integral

from identicon.config import InvalidConfigurationError

RGB = tuple[int, int, int]

DEFAULT_FOREGROUND: list[RGB] = [
    (45, 79, 255),
    (254, 180, 44),
    (226, 121, 234),
    (30, 179, 253),
    (232, 77, 65),
    (49, 203, 115),
    (141, 69, 170),
]
DEFAULT_BACKGROUND: RGB = (224, 224, 224)


def as_rgb(color: Sequence[int]) -> RGB:
    """Check that *color* is exactly three channel ints in ``range(256)``."""
    try:
        channels = tuple(color)
    except TypeError:
        channels = ()
    if len(channels) != 3 or not all(
        isinstance(c, Integral) and not isinstance(c, bool) and 0 <= c <= 255
        for c in channels
    ):
        msg = f"Expected an (r, g, b) colour with channels in 0-255, got {color!r}"
        raise InvalidConfigurationError(msg)
    r, g, b = (int(c) for c in channels)
    return r, g, b


def hex_to_rgb(hex_str: str) -> RGB:
    """Parse ``'#RRGGBB'`` (leading ``#`` optional) to an RGB tuple."""
    h = hex_str.strip().lstrip("#")
    if len(h) != 6:
        msg = f"Expected a #RRGGBB colour, got '{hex_str}'"
        raise InvalidConfigurationError(msg)
    try:
        r, g, b = (int(h[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError as exc:
        msg = f"Expected a #RRGGBB colour, got '{hex_str}'"
        raise InvalidConfigurationError(msg) from exc
    return r, g, b


def parse_hex_colors(colors: str) -> list[RGB]:
    """Parse a comma-separated list like ``'#FF7F11,#262626'``."""
    return [hex_to_rgb(part) for part in colors.split(",") if part.strip()]


def pick_colors(
    digest: bytes,
    foreground: Sequence[RGB],
    background: RGB,
    inverted: bool = False,
) -> tuple[RGB, RGB]:
    """Choose the paint colour and the canvas background for a digest.

    The first digest byte indexes into *foreground*. When *inverted* the
    roles swap: the configured background becomes the paint colour and
    the chosen foreground fills the canvas.

    Returns:
        ``(paint, canvas_background)``.
    """
    if not foreground:
        msg = "Foreground palette must contain at least one colour"
        raise InvalidConfigurationError(msg)

    chosen = tuple(foreground[digest[0] % len(foreground)])
    if inverted:
        return tuple(background), chosen
    return chosen, tuple(background)
