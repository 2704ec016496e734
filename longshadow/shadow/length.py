"""Lengths: a magnitude plus a CSS unit."""

from __future__ import annotations

import math
import re

from pydantic import BaseModel, ConfigDict

from ..config import DEFAULT_UNIT
from .errors import InvalidLengthError

_LENGTH_RE = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)([a-z%]*)$", re.IGNORECASE)


class Length(BaseModel):
    """A linear magnitude such as ``50px`` or ``2.5em``."""

    model_config = ConfigDict(frozen=True)

    value: float
    unit: str = DEFAULT_UNIT

    def __str__(self) -> str:
        return f"{self.value:g}{self.unit}"


def parse_length(value: object, default_unit: str = DEFAULT_UNIT) -> Length:
    """Normalize ``value`` into a positive :class:`Length`.

    Raises:
        InvalidLengthError: If the value is unparsable, non-finite or not > 0.
    """
    if isinstance(value, Length):
        length = value
    elif isinstance(value, bool):
        raise InvalidLengthError(f"invalid length: {value!r}")
    elif isinstance(value, (int, float)):
        length = Length(value=float(value), unit=default_unit)
    elif isinstance(value, str):
        m = _LENGTH_RE.match(value.strip())
        if not m:
            raise InvalidLengthError(f"invalid length: {value!r}")
        length = Length(value=float(m.group(1)), unit=(m.group(2) or default_unit).lower())
    else:
        raise InvalidLengthError(f"unsupported length type: {type(value)!r}")

    if not math.isfinite(length.value) or length.value <= 0:
        raise InvalidLengthError(f"length must be a positive number, got {value!r}")
    return length
