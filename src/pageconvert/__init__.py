"""PageConvert package."""

from pageconvert.exceptions import (
    ArgumentParseError,
    DependencyError,
    InvalidRangeError,
    OutputExistsError,
    PackageError,
    RenderError,
    SettingsError,
)
from pageconvert.logging import configure_logging, get_logger
from pageconvert.settings import Settings, get_settings

__version__ = "0.1.0"

# Initialize package logger at import time via `get_logger`.
logger = get_logger("pageconvert")

__all__ = [
    "ArgumentParseError",
    "DependencyError",
    "InvalidRangeError",
    "OutputExistsError",
    "PackageError",
    "RenderError",
    "Settings",
    "SettingsError",
    "__version__",
    "configure_logging",
    "get_logger",
    "get_settings",
    "logger",
]
