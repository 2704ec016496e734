"""CSS output for long shadows."""

from .render import (
    declaration,
    format_color,
    format_layer,
    format_number,
    long_shadow_css,
    rule,
    to_shadow_list,
)

__all__ = [
    "declaration",
    "format_color",
    "format_layer",
    "format_number",
    "long_shadow_css",
    "rule",
    "to_shadow_list",
]
