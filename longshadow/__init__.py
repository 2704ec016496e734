"""longshadow: generate long-shadow layer stacks for CSS."""

__version__ = "0.1.0"

from .css import declaration, long_shadow_css, rule, to_shadow_list
from .shadow import (
    Color,
    FadeToColor,
    FadeToTransparent,
    Keyword,
    Length,
    NoFade,
    ShadowError,
    ShadowLayer,
    UnknownDirectionError,
    generate,
)

__all__ = [
    "__version__",
    "generate",
    "ShadowLayer",
    "Color",
    "Keyword",
    "Length",
    "NoFade",
    "FadeToTransparent",
    "FadeToColor",
    "ShadowError",
    "UnknownDirectionError",
    "declaration",
    "rule",
    "to_shadow_list",
    "long_shadow_css",
]
