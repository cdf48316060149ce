"""Core domain model exports."""

from pageconvert.typing.models.conversion import (
    ConversionRequest,
    ConversionResult,
    PageInterval,
    RenderOptions,
)
from pageconvert.typing.models.echo import EchoRequest

__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "EchoRequest",
    "PageInterval",
    "RenderOptions",
]
