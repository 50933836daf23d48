"""Identity hashing with a pluggable, per-call hash object."""

from __future__ import annotations

import functools
import hashlib
from collections.abc import Callable
from typing import Any

from identicon.config import InvalidConfigurationError

HashFactory = Callable[[], Any]


def resolve_hash_factory(hash_function: str | HashFactory) -> HashFactory:
    """Turn a hashlib algorithm name or a factory into a factory.

    A factory is any zero-argument callable returning an object with
    ``update(bytes)`` and ``digest()``, e.g. ``hashlib.sha256``.
    Variable-length algorithms (``shake_128``, ``shake_256``) are rejected.
    """
    if callable(hash_function):
        factory = hash_function
    else:
        name = hash_function.lower()
        if name not in hashlib.algorithms_available:
            available = ", ".join(sorted(hashlib.algorithms_guaranteed))
            msg = f"Unknown hash function '{hash_function}'. Available: {available}"
            raise InvalidConfigurationError(msg)
        factory = functools.partial(hashlib.new, name)

    if digest_size(factory) == 0:
        msg = f"Hash function '{hash_function}' has no fixed digest size"
        raise InvalidConfigurationError(msg)
    return factory


def digest_size(hash_factory: HashFactory) -> int | None:
    """Digest length reported by the factory's objects, or None if unknown."""
    return getattr(hash_factory(), "digest_size", None)


def hash_identity(identity: str, salt: str, hash_factory: HashFactory) -> bytes:
    """Digest *identity* followed by *salt* with a fresh hash object.

    Lone surrogates are encoded as-is, so any ``str`` can be hashed.
    """
    h = hash_factory()
    h.update(identity.encode("utf-8", "surrogatepass"))
    h.update(salt.encode("utf-8", "surrogatepass"))
    return h.digest()
