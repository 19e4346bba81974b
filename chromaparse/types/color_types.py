from __future__ import annotations
from typing import Literal, Tuple, Union

Scalar = Union[int, float]
RGBATuple = Tuple[int, int, int, float]
HexTriplet = Tuple[str, str, str]
ColorSpace = Literal["rgb", "rgba", "hsl", "hsla", "hsv", "hsva"]
ALPHA_SPACES = {"rgba", "hsla", "hsva"}


def channel_count(color_space: ColorSpace) -> int:
    """Number of arguments the functional notation of ``color_space`` takes."""
    return 4 if color_space.lower() in ALPHA_SPACES else 3
