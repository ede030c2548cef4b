"""Readable, collision-resistant names for test data."""

from __future__ import annotations

import random
import string

SUFFIX_LENGTH = 6


def generate_readable_name(prefix: str, rng: random.Random | None = None) -> str:
    """
    Build a name like ``chicken-XDFQZM`` from a prefix.

    The suffix is six random uppercase letters. Names are unique with
    overwhelming probability within a run, not guaranteed unique.

    Args:
        prefix: Leading part of the name.
        rng: Optional random source (for reproducible tests).

    Returns:
        ``f"{prefix}-{suffix}"``
    """
    source = rng or random
    suffix = "".join(source.choice(string.ascii_uppercase) for _ in range(SUFFIX_LENGTH))
    return f"{prefix}-{suffix}"
