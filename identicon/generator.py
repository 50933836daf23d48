"""Render identities into two-colour paletted Pillow images."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
from PIL import Image

from identicon.config import IdenticonConfig, InvalidConfigurationError
from identicon.digest import digest_size, hash_identity, resolve_hash_factory
from identicon.palette import (
    DEFAULT_BACKGROUND,
    DEFAULT_FOREGROUND,
    RGB,
    as_rgb,
    pick_colors,
)
from identicon.pattern import build_cells, required_digest_size

logger = logging.getLogger(__name__)


class Generator:
    """Deterministic identicon generator.

    The hash object is created per call, so one generator can be shared
    between threads.

    Args:
        foreground: Candidate paint colours; one is chosen per identity.
        background: Canvas colour.
        config:     Generator settings (defaults to :class:`IdenticonConfig`).
    """

    def __init__(
        self,
        foreground: Sequence[RGB],
        background: RGB,
        config: IdenticonConfig | None = None,
    ) -> None:
        if not foreground:
            msg = "Foreground palette must contain at least one colour"
            raise InvalidConfigurationError(msg)

        self.foreground: tuple[RGB, ...] = tuple(as_rgb(c) for c in foreground)
        self.background: RGB = as_rgb(background)
        self.config = config if config is not None else IdenticonConfig()
        self._hash_factory = resolve_hash_factory(self.config.hash_function)

        size = digest_size(self._hash_factory)
        needed = required_digest_size(self.config.block_size)
        if size is not None and size < needed:
            msg = (
                f"{size}-byte digest is too short for block_size "
                f"{self.config.block_size} (needs {needed})"
            )
            raise InvalidConfigurationError(msg)

    def digest(self, identity: str) -> bytes:
        return hash_identity(identity, self.config.salt, self._hash_factory)

    def render(self, identity: str) -> np.ndarray:
        """Return the ``(icon_size, icon_size)`` uint8 grid of palette indices."""
        return self._paint(self.digest(identity))

    def _paint(self, digest: bytes) -> np.ndarray:
        cfg = self.config
        canvas = np.zeros((cfg.icon_size, cfg.icon_size), dtype=np.uint8)
        for x0, y0, x1, y1 in build_cells(
            digest, cfg.block_size, cfg.icon_size, cfg.legacy_layout,
        ):
            canvas[y0:y1, x0:x1] = 1
        return canvas

    def generate(self, identity: str) -> Image.Image:
        """Render *identity* as a mode ``"P"`` image with a 2-entry palette.

        Index 0 is the canvas background, index 1 the paint colour.
        """
        cfg = self.config
        digest = self.digest(identity)
        paint, canvas_bg = pick_colors(
            digest, self.foreground, self.background, cfg.inverted,
        )
        logger.debug(
            "identity=%r digest=%s paint=%s background=%s",
            identity, digest[:4].hex(), paint, canvas_bg,
        )

        pixels = self._paint(digest)
        image = Image.frombytes("P", (cfg.icon_size, cfg.icon_size), pixels.tobytes())
        image.putpalette([*canvas_bg, *paint])
        return image


def default_generator() -> Generator:
    """Seven-colour palette on light grey, SHA-1, 5x5 grid, 200 px."""
    return Generator(DEFAULT_FOREGROUND, DEFAULT_BACKGROUND, IdenticonConfig())
