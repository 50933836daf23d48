"""
Identicon Generator
===================

Derive a small, horizontally symmetric two-colour avatar from any
identity string.  The same identity and configuration always yield the
same pixels.

- **Digest**: identity + salt through a pluggable hash (SHA-1 by default)
- **Pattern**: digest bits decide the cells of a mirrored grid
- **Colours**: the first digest byte picks one foreground from a palette
"""

__version__ = "1.0.0"

from identicon.config import IdenticonConfig, InvalidConfigurationError
from identicon.digest import hash_identity, resolve_hash_factory
from identicon.generator import Generator, default_generator
from identicon.image_io import encode_identicon, save_identicon
from identicon.palette import (
    DEFAULT_BACKGROUND,
    DEFAULT_FOREGROUND,
    as_rgb,
    hex_to_rgb,
    parse_hex_colors,
    pick_colors,
)
from identicon.pattern import Rect, build_cells, is_filled

__all__ = [
    "DEFAULT_BACKGROUND",
    "DEFAULT_FOREGROUND",
    "Generator",
    "IdenticonConfig",
    "InvalidConfigurationError",
    "Rect",
    "as_rgb",
    "build_cells",
    "default_generator",
    "encode_identicon",
    "hash_identity",
    "hex_to_rgb",
    "is_filled",
    "parse_hex_colors",
    "pick_colors",
    "resolve_hash_factory",
    "save_identicon",
]
