"""Page conversion models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pageconvert.typing.enums import ImageFormat


class RenderOptions(BaseModel):
    """Fixed options handed to the rendering engine for every page."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    resolution_x: int = Field(default=300, ge=1)
    resolution_y: int = Field(default=300, ge=1)
    produce_device_independent_bitmap: bool = False


class PageInterval(BaseModel):
    """Closed interval of zero-based page indices."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @model_validator(mode="after")
    def _validate_order(self) -> PageInterval:
        """Ensure the interval is not inverted.

        Raises:
            ValueError: If `start` is greater than `end`.

        Returns:
            PageInterval: Validated interval.
        """
        if self.start > self.end:
            raise ValueError("Interval start must not exceed its end")  # noqa: TRY003
        return self

    @property
    def page_count(self) -> int:
        """Return the number of pages in the interval."""
        return self.end - self.start + 1

    def indices(self) -> range:
        """Return page indices in ascending order."""
        return range(self.start, self.end + 1)


class ConversionRequest(BaseModel):
    """Conversion request built from process arguments."""

    model_config = ConfigDict(extra="forbid")

    input_path: Path
    image_format: str = "jpg"
    page_start: int = 0
    page_end: int = -1
    output_dir: Path = Path(".")
    overwrite_existing: bool = True
    keep_partial_output: bool = True

    @field_validator("input_path")
    @classmethod
    def _validate_input_path(cls, value: Path) -> Path:
        """Ensure input path exists and points to a file.

        Args:
            value (Path): Input path.

        Raises:
            ValueError: If the path does not exist or is not a file.

        Returns:
            Path: Validated input path.
        """
        if not value.exists():
            raise ValueError("Input path does not exist")  # noqa: TRY003
        if not value.is_file():
            raise ValueError("Input path is not a file")  # noqa: TRY003
        return value


class ConversionResult(BaseModel):
    """Outcome of a completed conversion."""

    model_config = ConfigDict(extra="forbid")

    input_path: Path
    interval: PageInterval
    image_format: ImageFormat
    written_paths: list[Path] = Field(default_factory=list)
