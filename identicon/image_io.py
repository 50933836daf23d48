"""Encoding generated identicons to image containers."""

from __future__ import annotations

import io
from pathlib import Path

from PIL import Image

from identicon.config import InvalidConfigurationError

SUPPORTED_FORMATS: frozenset[str] = frozenset({"png", "gif", "webp", "bmp"})


def _check_format(output_format: str) -> str:
    fmt = output_format.lower().lstrip(".")
    if fmt not in SUPPORTED_FORMATS:
        available = ", ".join(sorted(SUPPORTED_FORMATS))
        msg = f"Unsupported output format '{output_format}'. Available: {available}"
        raise InvalidConfigurationError(msg)
    return fmt


def _upscaled(image: Image.Image, scale: int) -> Image.Image:
    if scale < 1:
        msg = f"scale must be >= 1, got {scale}"
        raise InvalidConfigurationError(msg)
    if scale == 1:
        return image
    w, h = image.size
    return image.resize((w * scale, h * scale), Image.NEAREST)


def encode_identicon(
    image: Image.Image,
    output_format: str = "png",
    scale: int = 1,
) -> bytes:
    """Serialise *image* to bytes, optionally nearest-neighbour upscaled."""
    fmt = _check_format(output_format)
    buf = io.BytesIO()
    _upscaled(image, scale).save(buf, format=fmt.upper())
    return buf.getvalue()


def save_identicon(
    image: Image.Image,
    path: str | Path,
    output_format: str | None = None,
    scale: int = 1,
) -> Path:
    """Write *image* to *path*.

    The format defaults to the file suffix.  Parent folders are created.
    """
    path = Path(path)
    fmt = _check_format(output_format or path.suffix or "png")
    path.parent.mkdir(parents=True, exist_ok=True)
    _upscaled(image, scale).save(path, format=fmt.upper())
    return path
