"""RGBA color model, parsing and mixing.

Channels (alpha included) are floats on the 0-255 scale so interpolated
layers keep full precision until they are written out.
"""

from __future__ import annotations

import math
import re
from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InvalidColorError


class Color(BaseModel):
    """An RGBA color."""

    model_config = ConfigDict(frozen=True)

    r: float = Field(ge=0, le=255)
    g: float = Field(ge=0, le=255)
    b: float = Field(ge=0, le=255)
    a: float = Field(default=255.0, ge=0, le=255)

    @property
    def is_opaque(self) -> bool:
        return self.a >= 255.0

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def with_alpha(self, a: float) -> Color:
        return self.model_copy(update={"a": _clamp255(a)})

    def mix(self, other: Color, fraction: float) -> Color:
        """Blend RGB toward ``other``; ``fraction`` 0 keeps self, 1 gives other.

        Alpha is left untouched.
        """
        t = float(fraction)
        return Color(
            r=_clamp255(self.r + (other.r - self.r) * t),
            g=_clamp255(self.g + (other.g - self.g) * t),
            b=_clamp255(self.b + (other.b - self.b) * t),
            a=self.a,
        )


_NAMED = {
    "black": (0, 0, 0, 255),
    "white": (255, 255, 255, 255),
    "transparent": (0, 0, 0, 0),
}

_FUNC_RE = re.compile(r"^(rgba?)\(\s*(.*?)\s*\)$", re.IGNORECASE)


def _clamp255(x: float) -> float:
    return 0.0 if x < 0.0 else 255.0 if x > 255.0 else float(x)


def parse_hex(s: str) -> Color:
    """Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa`` (``#`` optional)."""
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    if len(t) in (3, 4):
        t = "".join(ch * 2 for ch in t)
    if len(t) not in (6, 8):
        raise InvalidColorError(f"invalid hex color length: '{s}'")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
        a = int(t[6:8], 16) if len(t) == 8 else 255
    except ValueError as e:
        raise InvalidColorError(f"invalid hex color: '{s}'") from e
    return Color(r=r, g=g, b=b, a=a)


def _finite(value: float) -> float:
    if not math.isfinite(value):
        raise ValueError(f"non-finite color component: {value!r}")
    return value


def _parse_channel(token: str) -> float:
    if token.endswith("%"):
        return _finite(float(token[:-1])) * 255.0 / 100.0
    return _finite(float(token))


def _parse_alpha(token: str) -> float:
    if token.endswith("%"):
        return _finite(float(token[:-1])) * 255.0 / 100.0
    return _finite(float(token)) * 255.0


def parse_functional(s: str) -> Color:
    """Parse ``rgb(r, g, b)`` / ``rgba(r, g, b, a)`` with alpha on the 0-1 scale."""
    m = _FUNC_RE.match(s.strip())
    if not m:
        raise InvalidColorError(f"invalid color: '{s}'")
    body = m.group(2).replace("/", " ").replace(",", " ")
    parts = body.split()
    if len(parts) not in (3, 4):
        raise InvalidColorError(f"expected 3 or 4 components: '{s}'")
    try:
        r, g, b = (_clamp255(_parse_channel(p)) for p in parts[:3])
        a = _clamp255(_parse_alpha(parts[3])) if len(parts) == 4 else 255.0
    except ValueError as e:
        raise InvalidColorError(f"invalid color: '{s}'") from e
    return Color(r=r, g=g, b=b, a=a)


def _from_sequence(seq: Sequence[Any]) -> Color:
    if len(seq) not in (3, 4):
        raise InvalidColorError("color tuple/list must be length 3 or 4")
    try:
        values = [_finite(float(v)) for v in seq]
    except (TypeError, ValueError) as e:
        raise InvalidColorError(f"invalid color tuple/list: {seq!r}") from e
    if any(v < 0.0 or v > 255.0 for v in values):
        raise InvalidColorError(f"color channels must be within 0-255: {seq!r}")
    if len(values) == 3:
        values.append(255.0)
    r, g, b, a = values
    return Color(r=r, g=g, b=b, a=a)


def parse_color(value: object) -> Color:
    """Normalize a color-like value into a :class:`Color`.

    Accepts a ``Color``, an ``(r, g, b[, a])`` tuple on the 0-255 scale,
    a hex string, ``rgb()``/``rgba()`` notation, or ``black``/``white``/``transparent``.

    Raises:
        InvalidColorError: If the value cannot be interpreted.
    """
    if isinstance(value, Color):
        return value
    try:
        return _coerce(value)
    except ValidationError as e:
        raise InvalidColorError(f"invalid color: {value!r}") from e


def _coerce(value: object) -> Color:
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _NAMED:
            return _from_sequence(_NAMED[text])
        if text.startswith("rgb"):
            return parse_functional(text)
        return parse_hex(text)
    if isinstance(value, (list, tuple)):
        return _from_sequence(value)
    raise InvalidColorError(f"unsupported color type: {type(value)!r}")
