from __future__ import annotations

import pytest

from pageconvert.typing.enums import ImageFormat, output_extension


@pytest.mark.parametrize("token", ["PNG", "png", "PnG", " png "])
def test_format_selection_ignores_case(token: str) -> None:
    assert ImageFormat.from_token(token) == ImageFormat.PNG


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("bmp", ImageFormat.BMP),
        ("gif", ImageFormat.GIF),
        ("jpg", ImageFormat.JPEG),
        ("JPEG", ImageFormat.JPEG),
        ("xyz", ImageFormat.JPEG),
        ("", ImageFormat.JPEG),
    ],
)
def test_format_selection_is_total(token: str, expected: ImageFormat) -> None:
    assert ImageFormat.from_token(token) == expected


def test_format_selection_is_idempotent() -> None:
    selected = ImageFormat.from_token("Gif")

    assert ImageFormat.from_token(selected.to_str()) == selected


def test_pil_format_names() -> None:
    assert [fmt.pil_format for fmt in ImageFormat] == ["BMP", "PNG", "GIF", "JPEG"]


@pytest.mark.parametrize(
    ("token", "expected"),
    [("PNG", "png"), ("jpg", "jpg"), ("jpeg", "jpeg"), ("tiff", "jpg")],
)
def test_output_extension(token: str, expected: str) -> None:
    assert output_extension(token) == expected
