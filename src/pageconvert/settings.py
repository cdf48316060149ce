"""Runtime settings loaded from `.env` and environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pageconvert.exceptions import SettingsError
from pageconvert.typing.models import RenderOptions


class Settings(BaseSettings):
    """Package settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level, e.g. 'INFO', 'DEBUG'.",
    )
    log_json: bool = Field(
        default=True,
        validation_alias="LOG_JSON",
        description="Enable JSON formatted logs.",
    )
    log_file: str | None = Field(
        default=None,
        validation_alias="LOG_FILE",
        description="File path for log output.",
    )

    render_dpi: int = Field(
        default=300,
        ge=1,
        validation_alias="RENDER_DPI",
        description="Horizontal and vertical render resolution.",
    )
    output_dir: Path = Field(
        default=Path("."),
        validation_alias="OUTPUT_DIR",
        description="Directory receiving rendered page images.",
    )
    overwrite_existing: bool = Field(
        default=True,
        validation_alias="OVERWRITE_EXISTING",
        description="Overwrite page images that already exist.",
    )
    keep_partial_output: bool = Field(
        default=True,
        validation_alias="KEEP_PARTIAL_OUTPUT",
        description="Keep images written before a conversion failure.",
    )

    server_host: str = Field(
        default="0.0.0.0",  # noqa: S104
        validation_alias="SERVER_HOST",
        description="Bind address of the reverse service.",
    )
    server_port: int = Field(
        default=8888,
        ge=1,
        le=65535,
        validation_alias="SERVER_PORT",
        description="Listening port of the reverse service.",
    )
    use_page_path: Path | None = Field(
        default=None,
        validation_alias="USE_PAGE_PATH",
        description="HTML page served on GET /use; defaults to the packaged asset.",
    )

    def render_options(self) -> RenderOptions:
        """Build render options from the configured resolution.

        Returns:
            RenderOptions: Options passed to the rendering engine.
        """
        return RenderOptions(resolution_x=self.render_dpi, resolution_y=self.render_dpi)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance.

    Raises:
        SettingsError: If settings cannot be loaded or validated.

    Returns:
        Settings: The loaded settings instance.
    """
    try:
        return Settings()
    except Exception as exc:
        raise SettingsError(exc=exc) from exc
