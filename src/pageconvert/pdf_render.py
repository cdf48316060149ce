"""PyMuPDF rendering engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

try:
    import fitz
except Exception:  # pragma: no cover - optional dependency at runtime
    fitz: Any
    fitz = None

try:
    from PIL import Image
except Exception:  # pragma: no cover - optional dependency at runtime
    Image: Any
    Image = None

from pageconvert.exceptions import DependencyError, RenderError
from pageconvert.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path
    from types import TracebackType

    from pageconvert.typing.models import RenderOptions

logger = get_logger(__name__)

_PDF_BASE_DPI = 72


class PyMuPdfEngine:
    """Render PDF pages to Pillow images with PyMuPDF.

    The engine tracks every document it opened and closes the leftovers on `close()`,
    so callers should hold it in a `with` block.
    """

    def __init__(self) -> None:
        missing = [name for name, module in (("pymupdf", fitz), ("pillow", Image)) if module is None]
        if missing:
            raise DependencyError(missing_package=missing, message="PDF rendering")
        self._documents: list[Any] = []

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def open_document(self, pdf_path: Path) -> Any:
        """Open a PDF document.

        Args:
            pdf_path: PDF file to open.

        Raises:
            RenderError: If PyMuPDF cannot open the file.

        Returns:
            Any: PyMuPDF document handle.
        """
        try:
            document = fitz.open(pdf_path)
        except Exception as exc:
            raise RenderError(message=f"Failed to open PDF: {pdf_path}") from exc
        self._documents.append(document)
        logger.debug("PDF opened", extra={"input_path": str(pdf_path), "pages": document.page_count})
        return document

    def page_count(self, document: Any) -> int:
        return document.page_count

    def render_page(self, document: Any, page_index: int, options: RenderOptions) -> Image.Image:
        """Rasterize one page into an RGB or grayscale Pillow image.

        Args:
            document: Handle returned by `open_document`.
            page_index: Zero-based page index.
            options: Render options.

        Raises:
            RenderError: If a device-independent bitmap is requested.

        Returns:
            Image.Image: Rendered page; the caller closes it.
        """
        if options.produce_device_independent_bitmap:
            raise RenderError(message="Device-independent bitmaps are not supported", page_index=page_index)

        page = document.load_page(page_index)
        matrix = fitz.Matrix(options.resolution_x / _PDF_BASE_DPI, options.resolution_y / _PDF_BASE_DPI)
        pixmap = page.get_pixmap(matrix=matrix, alpha=False)
        mode = "L" if pixmap.n == 1 else "RGB"
        return Image.frombytes(mode, (pixmap.width, pixmap.height), pixmap.samples)

    def close_document(self, document: Any) -> None:
        if document in self._documents:
            self._documents.remove(document)
        document.close()

    def close(self) -> None:
        """Close every document still open."""
        while self._documents:
            self._documents.pop().close()
