"""Exceptions raised by the color pipeline."""


class ColorPipelineError(Exception):
    """Base class for errors raised while resolving a color."""


class UnsupportedColorTypeError(ColorPipelineError, ValueError):
    """A parsed color carries a color type the converter does not handle."""

    def __init__(self, color_type):
        self.color_type = color_type
        super().__init__(f"Unsupported color type: {color_type}")
