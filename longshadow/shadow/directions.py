"""Direction keywords and angle resolution.

Angles are measured clockwise from the downward axis: 0deg points down
(``to bottom``) and 90deg points right (``to right``).
"""

from __future__ import annotations

import math
import re
from enum import StrEnum
from types import MappingProxyType
from typing import Mapping

from .errors import UnknownDirectionError


class Keyword(StrEnum):
    """Named compass directions."""

    TO_TOP = "to top"
    TO_TOP_RIGHT = "to top right"
    TO_RIGHT_TOP = "to right top"
    TO_RIGHT = "to right"
    TO_BOTTOM_RIGHT = "to bottom right"
    TO_RIGHT_BOTTOM = "to right bottom"
    TO_BOTTOM = "to bottom"
    TO_BOTTOM_LEFT = "to bottom left"
    TO_LEFT_BOTTOM = "to left bottom"
    TO_LEFT = "to left"
    TO_LEFT_TOP = "to left top"
    TO_TOP_LEFT = "to top left"


KEYWORD_ANGLES: Mapping[Keyword, float] = MappingProxyType(
    {
        Keyword.TO_TOP: 180.0,
        Keyword.TO_TOP_RIGHT: 135.0,
        Keyword.TO_RIGHT_TOP: 135.0,
        Keyword.TO_RIGHT: 90.0,
        Keyword.TO_BOTTOM_RIGHT: 45.0,
        Keyword.TO_RIGHT_BOTTOM: 45.0,
        Keyword.TO_BOTTOM: 0.0,
        Keyword.TO_BOTTOM_LEFT: 315.0,
        Keyword.TO_LEFT_BOTTOM: 315.0,
        Keyword.TO_LEFT: 270.0,
        Keyword.TO_LEFT_TOP: 225.0,
        Keyword.TO_TOP_LEFT: 225.0,
    }
)

# Degrees per unit for CSS angle units
_ANGLE_UNITS = {
    "deg": 1.0,
    "rad": 180.0 / math.pi,
    "grad": 0.9,
    "turn": 360.0,
}

_ANGLE_RE = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)(deg|rad|grad|turn)?$", re.IGNORECASE)


def normalize_keyword(text: str) -> str:
    """Lowercase and collapse whitespace (``"To  Top"`` -> ``"to top"``)."""
    return " ".join(text.split()).lower()


def lookup_keyword(text: str) -> Keyword | None:
    try:
        return Keyword(normalize_keyword(text))
    except ValueError:
        return None


def parse_angle(text: str) -> float:
    """Parse a CSS angle such as ``45``, ``45deg``, ``0.25turn`` into degrees."""
    m = _ANGLE_RE.match(text.strip())
    if not m:
        raise UnknownDirectionError(text)
    value = float(m.group(1))
    unit = (m.group(2) or "deg").lower()
    return value * _ANGLE_UNITS[unit]


def resolve_direction(direction: float | int | str | Keyword) -> float:
    """Resolve a direction to degrees.

    Keywords go through the static table; anything else must be a finite
    number or an angle string.

    Raises:
        UnknownDirectionError: If the value is neither.
    """
    if isinstance(direction, Keyword):
        return KEYWORD_ANGLES[direction]
    if isinstance(direction, bool):
        raise UnknownDirectionError(direction)
    if isinstance(direction, (int, float)):
        degrees = float(direction)
    elif isinstance(direction, str):
        keyword = lookup_keyword(direction)
        if keyword is not None:
            return KEYWORD_ANGLES[keyword]
        degrees = parse_angle(direction)
    else:
        raise UnknownDirectionError(direction)

    if not math.isfinite(degrees):
        raise UnknownDirectionError(direction)
    return degrees
