"""Digest bits → horizontally mirrored cell rectangles.

Only the left half of the grid (plus the centre column when the block
size is odd) is decided by the digest; every other cell is a mirror
image.  Cells are laid out column by column: cell ``i`` sits in column
``i // block_size`` and row ``i % block_size``.

Releases before the 2-D layout placed every cell at
``row == column == i // block_size``.  That layout is kept behind
``legacy_layout=True`` so stored identicons can be reproduced pixel for
pixel.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from identicon.config import InvalidConfigurationError

logger = logging.getLogger(__name__)


class Rect(NamedTuple):
    """Pixel rectangle; ``x1`` and ``y1`` are exclusive."""

    x0: int
    y0: int
    x1: int
    y1: int


def half_columns(block_size: int) -> int:
    """Columns decided by the digest, centre column included."""
    return block_size // 2 + block_size % 2


def required_digest_size(block_size: int) -> int:
    """Minimum digest length in bytes for *block_size*."""
    cells = block_size * half_columns(block_size)
    return (cells + 7) // 8


def is_filled(digest: bytes, index: int) -> bool:
    """Fill decision for cell *index*.

    Reads bit ``9 - index % 8`` of byte ``index // 8``.  Shifts of 8 and 9
    push every bit out of the byte, so cells with ``index % 8`` of 0 or 1
    are always empty.
    """
    shift = 9 - index % 8
    if shift >= 8:
        return False
    return (digest[index // 8] >> shift) & 1 == 1


def build_cells(
    digest: bytes,
    block_size: int,
    icon_size: int,
    legacy_layout: bool = False,
) -> list[Rect]:
    """Compute the filled rectangles for one identicon.

    Args:
        digest:        Hash of identity + salt.
        block_size:    Cells per row / column of the full grid.
        icon_size:     Canvas side in pixels.
        legacy_layout: Use the ``row == column`` placement.

    Returns:
        Unordered list of rectangles; may contain duplicates.
    """
    if block_size <= 0 or icon_size <= 0:
        msg = f"block_size and icon_size must be positive, got {block_size}, {icon_size}"
        raise InvalidConfigurationError(msg)

    needed = required_digest_size(block_size)
    if len(digest) < needed:
        msg = (
            f"Digest of {len(digest)} bytes is too short for block_size "
            f"{block_size} (needs {needed})"
        )
        raise InvalidConfigurationError(msg)

    width = icon_size // (block_size + 1)
    pad = width // 2
    cols = half_columns(block_size)
    cells = block_size * cols
    even = block_size % 2 == 0

    rects: list[Rect] = []
    for i in range(cells):
        if not is_filled(digest, i):
            continue

        column = i // block_size
        row = column if legacy_layout else i % block_size

        x0 = pad + column * width
        y0 = pad + row * width
        x1 = x0 + width
        if even and column == cols - 1:
            # centre seam spans two cells
            x1 += width
        rects.append(Rect(x0, y0, x1, y0 + width))

        if column < cols - 1:
            mx0 = pad + (block_size - column - 1) * width
            rects.append(Rect(mx0, y0, mx0 + width, y0 + width))

    logger.debug(
        "block_size=%d width=%d pad=%d -> %d rects", block_size, width, pad, len(rects),
    )
    return rects
