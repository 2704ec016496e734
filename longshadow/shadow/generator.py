"""Shadow layer generation.

A long shadow is a stack of unblurred shadows, each one a little further out
than the previous, optionally fading toward transparency or another color.
"""

from __future__ import annotations

import logging
import math

from pydantic import BaseModel, ConfigDict

from ..config import DEFAULT_LAYER_COUNT
from .color import Color, parse_color
from .directions import Keyword, resolve_direction
from .errors import InvalidLayerCountError
from .fade import Fade, NoFade, layer_color, parse_fade
from .length import Length, parse_length

logger = logging.getLogger(__name__)


class ShadowLayer(BaseModel):
    """One ``x y blur color`` entry of a shadow list."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    blur: float = 0.0
    color: Color
    unit: str

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)


def validate_layer_count(layer_count: object) -> int:
    if isinstance(layer_count, bool) or not isinstance(layer_count, int):
        raise InvalidLayerCountError(f"layer count must be an integer, got {layer_count!r}")
    if layer_count < 1:
        raise InvalidLayerCountError(f"layer count must be >= 1, got {layer_count}")
    return layer_count


def generate(
    direction: float | int | str | Keyword,
    length: Length | float | str,
    color: Color | str | tuple,
    fade: Fade | object = None,
    layer_count: int = DEFAULT_LAYER_COUNT,
) -> list[ShadowLayer]:
    """Generate the layers of a long shadow.

    Args:
        direction: Degrees (0 points down, 90 right), an angle string such as
            ``"0.25turn"``, or a keyword such as ``"to bottom right"``
        length: Offset of the last layer; bare numbers use the default unit
        color: Base shadow color
        fade: ``NoFade``, ``FadeToTransparent``, ``FadeToColor`` or a loose
            equivalent accepted by :func:`parse_fade`
        layer_count: Number of layers to emit

    Returns:
        ``layer_count`` layers ordered from the smallest offset to ``length``

    Raises:
        ShadowError: On any invalid input; nothing is generated in that case.
    """
    degrees = resolve_direction(direction)
    size = parse_length(length)
    base = parse_color(color)
    fade_policy = NoFade() if fade is None else parse_fade(fade)
    count = validate_layer_count(layer_count)

    logger.debug(
        "long shadow: direction=%r -> %sdeg, length=%s, layers=%d, fade=%s",
        direction,
        degrees,
        size,
        count,
        fade_policy.kind,
    )

    radians = math.radians(degrees)
    sin_a = math.sin(radians)
    cos_a = math.cos(radians)

    layers: list[ShadowLayer] = []
    for i in range(1, count + 1):
        fraction = i / count
        step = i * size.value / count
        layers.append(
            ShadowLayer(
                x=sin_a * step,
                y=cos_a * step,
                blur=0.0,
                color=layer_color(base, fade_policy, fraction),
                unit=size.unit,
            )
        )
    return layers
