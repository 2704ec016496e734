"""Serialize shadow layers into CSS shadow lists."""

from __future__ import annotations

from collections.abc import Iterable

from ..config import CSS_PRECISION, DEFAULT_LAYER_COUNT, DEFAULT_PROPERTY, SHADOW_PROPERTIES
from ..shadow.color import Color
from ..shadow.errors import ShadowError
from ..shadow.generator import ShadowLayer, generate
from ..shadow.length import Length


def format_number(value: float, precision: int = CSS_PRECISION) -> str:
    """Round and strip trailing zeros; ``-0`` becomes ``0``."""
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise ShadowError(f"precision must be a non-negative integer, got {precision!r}")
    text = f"{round(value, precision):.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def format_length(value: float, unit: str, precision: int = CSS_PRECISION) -> str:
    text = format_number(value, precision)
    return text if text == "0" else f"{text}{unit}"


def format_color(color: Color, precision: int = CSS_PRECISION) -> str:
    """``#rrggbb`` for opaque colors, ``rgba(r, g, b, a)`` otherwise."""
    r, g, b = (int(round(c)) for c in (color.r, color.g, color.b))
    if color.is_opaque:
        return f"#{r:02x}{g:02x}{b:02x}"
    alpha = format_number(color.a / 255.0, precision)
    return f"rgba({r}, {g}, {b}, {alpha})"


def format_layer(layer: ShadowLayer, precision: int = CSS_PRECISION) -> str:
    return " ".join(
        [
            format_length(layer.x, layer.unit, precision),
            format_length(layer.y, layer.unit, precision),
            format_length(layer.blur, layer.unit, precision),
            format_color(layer.color, precision),
        ]
    )


def to_shadow_list(layers: Iterable[ShadowLayer], precision: int = CSS_PRECISION) -> str:
    items = [format_layer(layer, precision) for layer in layers]
    return ", ".join(items) if items else "none"


def _check_property(prop: str) -> str:
    if prop not in SHADOW_PROPERTIES:
        allowed = ", ".join(SHADOW_PROPERTIES)
        raise ShadowError(f"unsupported property {prop!r} (expected one of: {allowed})")
    return prop


def declaration(
    layers: Iterable[ShadowLayer],
    prop: str = DEFAULT_PROPERTY,
    precision: int = CSS_PRECISION,
) -> str:
    return f"{_check_property(prop)}: {to_shadow_list(layers, precision)};"


def rule(
    selector: str,
    layers: Iterable[ShadowLayer],
    prop: str = DEFAULT_PROPERTY,
    precision: int = CSS_PRECISION,
) -> str:
    return f"{selector} {{\n  {declaration(layers, prop, precision)}\n}}\n"


def long_shadow_css(
    direction: float | str,
    length: float | str | Length,
    color: object,
    fade: object = None,
    layer_count: int = DEFAULT_LAYER_COUNT,
    prop: str = DEFAULT_PROPERTY,
    precision: int = CSS_PRECISION,
) -> str:
    """Generate a long shadow and return it as a single CSS declaration."""
    _check_property(prop)
    layers = generate(direction, length, color, fade=fade, layer_count=layer_count)
    return declaration(layers, prop, precision)
