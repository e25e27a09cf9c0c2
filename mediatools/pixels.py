"""Read images as flat RGBA float arrays and write such arrays as JPEG files."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from PIL import Image

_CHANNELS = 4


@dataclass(frozen=True)
class Dimensions:
    """Width and height of an image in pixels."""

    width: int
    height: int


class DimensionsError(ValueError):
    """Raised when a pixel array is too small for the given dimensions."""


def read_f32(input_file: str) -> tuple[Dimensions, list[float]]:
    """Open an image and return its size and RGBA samples scaled to [0, 1]."""
    with Image.open(input_file) as image:
        rgba = image.convert("RGBA")
        dimensions = Dimensions(rgba.width, rgba.height)
        samples = [value / 255.0 for value in rgba.tobytes()]
    return dimensions, samples


def _to_byte(value: float) -> int:
    if math.isnan(value):
        return 0
    return round(min(max(value, 0.0), 1.0) * 255.0)


def write_f32(dimensions: Dimensions, pixels: Sequence[float], output_file: str) -> None:
    """Save RGBA samples in [0, 1] as a JPEG image."""
    needed = dimensions.width * dimensions.height * _CHANNELS
    if len(pixels) < needed:
        raise DimensionsError(
            f"{len(pixels)} samples cannot fill a "
            f"{dimensions.width}x{dimensions.height} RGBA image"
        )
    data = bytes(_to_byte(value) for value in pixels[:needed])
    image = Image.frombytes("RGBA", (dimensions.width, dimensions.height), data)
    image.convert("RGB").save(output_file, format="JPEG")