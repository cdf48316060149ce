"""Project enums."""

from __future__ import annotations

from enum import StrEnum


class ImageFormat(StrEnum):
    """Image formats the rasterizer can write."""

    BMP = "bmp"
    PNG = "png"
    GIF = "gif"
    JPEG = "jpeg"

    @classmethod
    def from_token(cls, token: str) -> ImageFormat:
        """Select an image format from a user token, falling back to JPEG.

        Args:
            token: Format token as typed by the user (case-insensitive).

        Returns:
            ImageFormat: Selected format; JPEG for anything unrecognised.
        """
        return _FORMAT_BY_TOKEN.get(token.strip().lower(), cls.JPEG)

    def to_str(self) -> str:
        """Return string representation.

        Returns:
            str: Enum string value.
        """
        return self.value

    @property
    def pil_format(self) -> str:
        """Return the Pillow encoder name.

        Returns:
            str: Encoder name accepted by `Image.save(format=...)`.
        """
        return self.value.upper()


_FORMAT_BY_TOKEN = {
    "bmp": ImageFormat.BMP,
    "png": ImageFormat.PNG,
    "gif": ImageFormat.GIF,
    "jpg": ImageFormat.JPEG,
    "jpeg": ImageFormat.JPEG,
}


def output_extension(token: str) -> str:
    """Return the file extension written for a format token.

    Recognised tokens keep their own spelling (`jpg` and `jpeg` both stay as typed),
    anything else is written as `jpg`.

    Args:
        token: Format token as typed by the user.

    Returns:
        str: Lower-cased extension without the leading dot.
    """
    normalized = token.strip().lower()
    if normalized in _FORMAT_BY_TOKEN:
        return normalized
    return "jpg"
