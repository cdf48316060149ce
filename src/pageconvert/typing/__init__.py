"""Typing-centric domain modules."""

from pageconvert.typing.enums import ImageFormat, output_extension
from pageconvert.typing.models import (
    ConversionRequest,
    ConversionResult,
    EchoRequest,
    PageInterval,
    RenderOptions,
)
from pageconvert.typing.protocol import Bitmap, RenderingEngine

__all__ = [
    "Bitmap",
    "ConversionRequest",
    "ConversionResult",
    "EchoRequest",
    "ImageFormat",
    "PageInterval",
    "RenderOptions",
    "RenderingEngine",
    "output_extension",
]
