"""Package exceptions."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class PackageError(Exception):
    """Root exception for the package."""


@dataclass(frozen=True)
class SettingsError(PackageError):
    """Raised when settings cannot be loaded or validated."""

    message: str = "Failed to load settings"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass(frozen=True)
class DependencyError(PackageError):
    """Raised when optional runtime dependencies are missing."""

    missing_package: list[str]
    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Missing runtime dependencies for '{self.message}': {', '.join(self.missing_package)}"


@dataclass(frozen=True)
class ArgumentParseError(PackageError):
    """Raised when a page argument is not an integer."""

    value: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.value} is not a valid number."


@dataclass(frozen=True)
class InvalidRangeError(PackageError):
    """Raised when a requested page range does not fit the document."""

    page_start: int
    page_end: int
    page_count: int
    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return (
            f"{self.message} (start={self.page_start}, end={self.page_end}, pages={self.page_count})"
        )


@dataclass(frozen=True)
class RenderError(PackageError):
    """Raised when the rendering engine fails to open, render or encode a page."""

    message: str
    page_index: int | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        if self.page_index is None:
            return self.message
        return f"{self.message} (page {self.page_index})"


@dataclass(frozen=True)
class OutputExistsError(PackageError):
    """Raised when an output image exists and overwriting is disabled."""

    path: Path

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Output file already exists: {self.path}"
