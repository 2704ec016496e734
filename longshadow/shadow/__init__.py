"""Long-shadow layer generation."""

from .color import Color, parse_color
from .directions import KEYWORD_ANGLES, Keyword, resolve_direction
from .errors import (
    InvalidColorError,
    InvalidLayerCountError,
    InvalidLengthError,
    ShadowError,
    UnknownDirectionError,
)
from .fade import Fade, FadeToColor, FadeToTransparent, NoFade, parse_fade
from .generator import ShadowLayer, generate
from .length import Length, parse_length

__all__ = [
    "generate",
    "ShadowLayer",
    "Color",
    "parse_color",
    "Keyword",
    "KEYWORD_ANGLES",
    "resolve_direction",
    "Fade",
    "NoFade",
    "FadeToTransparent",
    "FadeToColor",
    "parse_fade",
    "Length",
    "parse_length",
    "ShadowError",
    "UnknownDirectionError",
    "InvalidColorError",
    "InvalidLengthError",
    "InvalidLayerCountError",
]
