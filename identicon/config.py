"""Centralised configuration via a frozen dataclass."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


class InvalidConfigurationError(ValueError):
    """Raised for settings that cannot produce an identicon."""


@dataclass(frozen=True)
class IdenticonConfig:
    """All tuneable parameters for an identicon generator.

    Zero values of ``block_size``, ``icon_size``, ``hash_function`` and
    ``output_format`` are replaced by their defaults on construction.

    Attributes:
        salt:           Appended to the identity before hashing.
        hash_function:  hashlib algorithm name or a zero-arg factory returning
                        a hashlib-compatible object.
        block_size:     Cells per row / column of the symmetric grid.
        padding:        Reserved margin value; not applied to the geometry.
        icon_size:      Side length of the output canvas in pixels.
        output_format:  Container format used by :mod:`identicon.image_io`.
        inverted:       Swap the foreground and background roles.
        legacy_layout:  Place cells with ``row == column`` for pixel
                        compatibility with identicons from older releases.
    """

    # Hashing
    salt: str = ""
    hash_function: str | Callable[[], Any] | None = "sha1"

    # Geometry
    block_size: int = 5
    padding: int = 0  # unused by rendering
    icon_size: int = 200
    legacy_layout: bool = False

    # Colours
    inverted: bool = False

    # Output
    output_format: str = "png"

    def __post_init__(self) -> None:
        if not self.block_size:
            object.__setattr__(self, "block_size", 5)
        if not self.icon_size:
            object.__setattr__(self, "icon_size", 200)
        if not self.hash_function:
            object.__setattr__(self, "hash_function", "sha1")
        if not self.output_format:
            object.__setattr__(self, "output_format", "png")

        if self.block_size < 0:
            msg = f"block_size must be positive, got {self.block_size}"
            raise InvalidConfigurationError(msg)
        if self.icon_size < 0:
            msg = f"icon_size must be positive, got {self.icon_size}"
            raise InvalidConfigurationError(msg)
