"""Rendering engine interfaces."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any, Protocol, Self

if TYPE_CHECKING:
    from pathlib import Path
    from types import TracebackType

    from pageconvert.typing.models import RenderOptions


class Bitmap(Protocol):
    """Rendered page bitmap; leaving the context releases its pixel buffer."""

    def __enter__(self) -> Self: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> object: ...

    def save(self, fp: str | Path | IO[bytes], format: str | None = None) -> None:  # noqa: A002
        """Encode the bitmap into `fp`.

        Args:
            fp: Target path or binary stream.
            format: Encoder name (`BMP`, `PNG`, `GIF`, `JPEG`).
        """


class RenderingEngine(Protocol):
    """Document-to-bitmap capability; the engine owns every native resource."""

    def open_document(self, pdf_path: Path) -> Any:
        """Open a document.

        Args:
            pdf_path: Source PDF path.

        Returns:
            Any: Opaque document handle.
        """

    def page_count(self, document: Any) -> int:
        """Return the number of pages of an open document.

        Args:
            document: Handle returned by `open_document`.

        Returns:
            int: Page count.
        """

    def render_page(self, document: Any, page_index: int, options: RenderOptions) -> Bitmap:
        """Rasterize one page.

        Args:
            document: Handle returned by `open_document`.
            page_index: Zero-based page index.
            options: Render options.

        Returns:
            Bitmap: Rendered page.
        """

    def close_document(self, document: Any) -> None:
        """Release a document handle.

        Args:
            document: Handle returned by `open_document`.
        """
