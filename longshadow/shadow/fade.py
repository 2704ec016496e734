"""Fade policies applied across the layers of a long shadow."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .color import Color, parse_color


class NoFade(BaseModel):
    """Every layer keeps the base color."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["none"] = "none"


class FadeToTransparent(BaseModel):
    """Alpha drops linearly to 0 at the last layer."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["transparent"] = "transparent"


class FadeToColor(BaseModel):
    """RGB moves linearly toward ``color``; alpha stays that of the base color."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["color"] = "color"
    color: Color

    @field_validator("color", mode="before")
    @classmethod
    def _coerce_color(cls, value: object) -> object:
        # mappings go through normal model validation
        if isinstance(value, dict):
            return value
        return parse_color(value)


Fade = Annotated[Union[NoFade, FadeToTransparent, FadeToColor], Field(discriminator="kind")]


def parse_fade(value: object) -> NoFade | FadeToTransparent | FadeToColor:
    """Accept the loose forms callers tend to pass for a fade.

    ``None``/``False``/``"none"`` -> no fade, ``True``/``"transparent"`` -> fade
    to transparent, anything color-like -> fade to that color.
    """
    if isinstance(value, (NoFade, FadeToTransparent, FadeToColor)):
        return value
    if value is None or value is False:
        return NoFade()
    if value is True:
        return FadeToTransparent()
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ("", "none", "false"):
            return NoFade()
        if text in ("transparent", "true"):
            return FadeToTransparent()
    return FadeToColor(color=parse_color(value))


def layer_color(base: Color, fade: NoFade | FadeToTransparent | FadeToColor, fraction: float) -> Color:
    """Color of the layer sitting at ``fraction`` (i / layer_count) of the stack."""
    if isinstance(fade, NoFade):
        return base
    if isinstance(fade, FadeToTransparent):
        return base.with_alpha(base.a * (1.0 - fraction))
    if isinstance(fade, FadeToColor):
        return base.mix(fade.color, fraction)
    raise TypeError(f"unsupported fade: {fade!r}")
