"""
RGBA color helpers.

Colors are plain ``(r, g, b, a)`` tuples of 8-bit channels, the same form
Pillow uses for pixels of an ``RGBA`` image.
"""

from typing import Tuple, Union

from PIL import ImageColor

Rgba = Tuple[int, int, int, int]


def border(channel: int, delta: int) -> int:
    """Apply ``delta`` to a channel, clamped to ``[0, 255]``."""
    return max(0, min(255, channel + delta))


def shade(color: Rgba, modifier: int) -> Rgba:
    """Shift the RGB channels by ``modifier``; alpha is kept."""
    r, g, b, a = color
    return (
        border(r, modifier),
        border(g, modifier),
        border(b, modifier),
        border(a, 0),
    )


def parse_color(value: Union[str, Tuple[int, ...]]) -> Rgba:
    """
    Normalize a color given as a Pillow color string or a tuple.

    Args:
        value: ``"#ff0000"``, ``"red"``, ``(255, 0, 0)`` or ``(255, 0, 0, 128)``.

    Returns:
        An RGBA tuple. Three-channel inputs become fully opaque.

    Raises:
        ValueError: If the color cannot be interpreted.
    """
    if isinstance(value, str):
        channels = ImageColor.getrgb(value)
    else:
        channels = tuple(value)

    if len(channels) == 3:
        channels = (*channels, 255)
    if len(channels) != 4:
        raise ValueError(f"Expected 3 or 4 color channels, got {value!r}")
    return tuple(border(int(c), 0) for c in channels)
