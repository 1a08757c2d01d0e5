"""
Shared helpers for random draws and node identity hashing.

Every random helper takes an optional ``rng``. When it is omitted the
process-wide generator of the ``random`` module is used, so callers that need
repeatable output pass a seeded ``random.Random`` instance.
"""

import hashlib
import random
from typing import Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


def roll(minimum: int, maximum: int, rng: Optional[random.Random] = None) -> int:
    """
    Return a random integer in the half-open range ``[minimum, maximum)``.

    Raises:
        ValueError: If the range is empty.
    """
    source = rng if rng is not None else random
    return source.randrange(minimum, maximum)


def get_random_item(items: Sequence[T], rng: Optional[random.Random] = None) -> T:
    """Return a random item from a non-empty sequence."""
    return items[roll(0, len(items), rng)]


def calculate_hash(name: str) -> int:
    """
    Return a stable 64-bit identity for a name.

    The value is the same across processes, which is required for edge files
    written by one run to be readable by another.
    """
    digest = hashlib.blake2b(name.encode("utf-8"), digest_size=8).digest()
    return int.from_bytes(digest, "big")


def check_bounds(size: Tuple[int, int], x: int, y: int) -> None:
    """
    Raise IndexError unless ``(x, y)`` lies on a surface of ``size``.

    Pillow wraps negative pixel indices around to the far edge, so they are
    rejected here along with indices past the edge.
    """
    width, height = size
    if not (0 <= x < width and 0 <= y < height):
        raise IndexError(f"Pixel ({x}, {y}) is outside the {width}x{height} surface")
