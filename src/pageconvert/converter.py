"""Rasterize a page range of a PDF document into image files."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from pageconvert.exceptions import OutputExistsError, RenderError
from pageconvert.logging import get_logger
from pageconvert.page_range import resolve_page_range
from pageconvert.typing.enums import ImageFormat, output_extension
from pageconvert.typing.models import ConversionRequest, ConversionResult, RenderOptions

if TYPE_CHECKING:
    from pathlib import Path

    from pageconvert.typing.protocol import RenderingEngine

logger = get_logger(__name__)

ProgressCallback = Callable[[int, int], None]


def build_output_name(base_name: str, page_index: int, extension: str) -> str:
    """Build the file name of one rendered page.

    Args:
        base_name: Input file name without its extension.
        page_index: Zero-based page index, zero-padded to at least four digits.
        extension: File extension without the leading dot.

    Returns:
        str: File name such as `Report0007.png`.
    """
    return f"{base_name}{page_index:04d}.{extension}"


def convert_pdf_to_images(
    request: ConversionRequest,
    *,
    engine: RenderingEngine,
    render_options: RenderOptions | None = None,
    on_progress: ProgressCallback | None = None,
) -> ConversionResult:
    """Render every page of the requested range and write one image per page.

    Pages are rendered one at a time in ascending order. The first failure aborts the loop;
    images written before it are kept unless `request.keep_partial_output` is false.

    Args:
        request: Conversion request.
        engine: Rendering engine used to open and rasterize the document.
        render_options: Render options; 300x300 dpi when omitted.
        on_progress: Optional callback receiving `(done, total)` after each page.

    Raises:
        InvalidRangeError: If the requested range does not fit the document.
        OutputExistsError: If a target exists and overwriting is disabled.
        RenderError: If the engine fails to render or encode a page.

    Returns:
        ConversionResult: Interval, format and written paths.
    """
    options = render_options or RenderOptions()
    image_format = ImageFormat.from_token(request.image_format)
    extension = output_extension(request.image_format)
    base_name = request.input_path.stem

    document = engine.open_document(request.input_path)
    try:
        interval = resolve_page_range(request.page_start, request.page_end, engine.page_count(document))
        targets = [
            (page_index, request.output_dir / build_output_name(base_name, page_index, extension))
            for page_index in interval.indices()
        ]
        if not request.overwrite_existing:
            _ensure_targets_absent(target for _, target in targets)

        written: list[Path] = []
        try:
            for done, (page_index, target) in enumerate(targets, start=1):
                _render_to_file(engine, document, page_index, options, target, image_format)
                written.append(target)
                logger.debug("Page written", extra={"page_index": page_index, "output_path": str(target)})
                if on_progress is not None:
                    on_progress(done, interval.page_count)
        except RenderError:
            if not request.keep_partial_output:
                # The failing page's target may hold a truncated image.
                _discard([path for _, path in targets[: len(written) + 1]])
            raise
    finally:
        engine.close_document(document)

    logger.info(
        "PDF converted",
        extra={
            "input_path": str(request.input_path),
            "pages": len(written),
            "image_format": image_format.to_str(),
        },
    )
    return ConversionResult(
        input_path=request.input_path,
        interval=interval,
        image_format=image_format,
        written_paths=written,
    )


def _render_to_file(
    engine: RenderingEngine,
    document: object,
    page_index: int,
    options: RenderOptions,
    target: Path,
    image_format: ImageFormat,
) -> None:
    """Render one page and encode it to `target`, releasing the bitmap either way.

    Raises:
        RenderError: If rendering or encoding fails.
    """
    try:
        with engine.render_page(document, page_index, options) as bitmap:
            bitmap.save(target, format=image_format.pil_format)
    except RenderError:
        raise
    except Exception as exc:
        raise RenderError(message=f"Failed to render {target.name}", page_index=page_index) from exc


def _ensure_targets_absent(targets: Iterable[Path]) -> None:
    for target in targets:
        if target.exists():
            raise OutputExistsError(path=target)


def _discard(paths: list[Path]) -> None:
    for path in paths:
        path.unlink(missing_ok=True)
    if paths:
        logger.info("Partial output discarded", extra={"files": len(paths)})
