"""Exceptions raised while building a long shadow."""


class ShadowError(ValueError):
    """Base class for invalid long-shadow input."""


class UnknownDirectionError(ShadowError):
    """Raised for a direction that is neither a keyword nor an angle."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"unrecognized direction: {value!r}")


class InvalidColorError(ShadowError):
    """Raised when a color value cannot be parsed."""


class InvalidLengthError(ShadowError):
    """Raised for an unparsable or non-positive length."""


class InvalidLayerCountError(ShadowError):
    """Raised when the layer count is not a positive integer."""
