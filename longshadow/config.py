"""Configuration constants for longshadow."""

import os
import warnings


def _env_int(name: str, default: int, minimum: int) -> int:
    """Read an integer override; bad or out-of-range values keep the default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = minimum - 1
    if value < minimum:
        warnings.warn(f"ignoring {name}={raw!r} (expected an integer >= {minimum}); using {default}")
        return default
    return value


# Resolution of the generated shadow stack when the caller does not pass one
DEFAULT_LAYER_COUNT = _env_int("LONGSHADOW_LAYER_COUNT", 100, minimum=1)

# Unit applied to bare numeric lengths
DEFAULT_UNIT = os.getenv("LONGSHADOW_UNIT", "px")

# Decimal places kept when writing offsets and alpha values
CSS_PRECISION = _env_int("LONGSHADOW_PRECISION", 3, minimum=0)

# Root log level used by the CLI
LOG_LEVEL = os.getenv("LONGSHADOW_LOG_LEVEL", "WARNING")

# Properties that accept a shadow list
SHADOW_PROPERTIES = ("text-shadow", "box-shadow")
DEFAULT_PROPERTY = "text-shadow"
