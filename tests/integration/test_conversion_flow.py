from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from pageconvert.converter import convert_pdf_to_images
from pageconvert.exceptions import InvalidRangeError
from pageconvert.pdf_render import PyMuPdfEngine
from pageconvert.typing.models import ConversionRequest, RenderOptions

if TYPE_CHECKING:
    from pathlib import Path

fitz = pytest.importorskip("fitz")
Image = pytest.importorskip("PIL.Image")


def _make_pdf(path: Path, pages: int) -> Path:
    document = fitz.open()
    for index in range(pages):
        page = document.new_page(width=72, height=144)
        page.insert_text((10, 20), f"page {index}")
    document.save(path)
    document.close()
    return path


@pytest.mark.parametrize(("token", "expected_format"), [("png", "PNG"), ("BMP", "BMP"), ("gif", "GIF"), ("jpeg", "JPEG")])
def test_real_pdf_pages_are_written_in_requested_format(tmp_path: Path, token: str, expected_format: str) -> None:
    pdf = _make_pdf(tmp_path / "Sample.pdf", pages=3)
    out_dir = tmp_path / "out"
    out_dir.mkdir()

    with PyMuPdfEngine() as engine:
        result = convert_pdf_to_images(
            ConversionRequest(input_path=pdf, image_format=token, page_start=1, output_dir=out_dir),
            engine=engine,
            render_options=RenderOptions(resolution_x=72, resolution_y=36),
        )

    extension = token.lower()
    assert [path.name for path in result.written_paths] == [f"Sample0001.{extension}", f"Sample0002.{extension}"]
    with Image.open(result.written_paths[0]) as image:
        assert image.format == expected_format
        assert image.size == (72, 72)


def test_real_pdf_rejects_out_of_range_start(tmp_path: Path) -> None:
    pdf = _make_pdf(tmp_path / "Sample.pdf", pages=2)
    out_dir = tmp_path / "out"
    out_dir.mkdir()

    with PyMuPdfEngine() as engine, pytest.raises(InvalidRangeError):
        convert_pdf_to_images(
            ConversionRequest(input_path=pdf, page_start=2, output_dir=out_dir),
            engine=engine,
        )

    assert list(out_dir.iterdir()) == []
