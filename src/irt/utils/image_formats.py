from enum import StrEnum
from pathlib import Path
from typing import BinaryIO

MAGIC_LENGTH = 4


class ImageFormat(StrEnum):
    PNG = "png"
    JPEG = "jpg"
    GIF = "gif"
    BMP = "bmp"
    UNKNOWN = "unknown"

    @property
    def extension(self) -> str:
        return self.value

    @property
    def pil_format(self) -> str | None:
        return _PIL_FORMATS.get(self)

    @property
    def is_decodable(self) -> bool:
        return self in DECODABLE_FORMATS

    @classmethod
    def from_magic(cls, head: bytes) -> "ImageFormat":
        if len(head) < MAGIC_LENGTH:
            return ImageFormat.UNKNOWN
        if head[:4] == b"\x89PNG":
            return ImageFormat.PNG
        elif head[:2] == b"\xff\xd8":
            return ImageFormat.JPEG
        elif head[:4] == b"GIF8":
            return ImageFormat.GIF
        elif head[:2] == b"BM":
            return ImageFormat.BMP
        else:
            return ImageFormat.UNKNOWN


_PIL_FORMATS: dict[ImageFormat, str] = {
    ImageFormat.PNG: "PNG",
    ImageFormat.JPEG: "JPEG",
    ImageFormat.GIF: "GIF",
    ImageFormat.BMP: "BMP",
}

DECODABLE_FORMATS: frozenset[ImageFormat] = frozenset(
    {ImageFormat.PNG, ImageFormat.JPEG, ImageFormat.GIF}
)


def sniff_bytes(head: bytes) -> ImageFormat:
    return ImageFormat.from_magic(head)


def sniff_format(file: BinaryIO) -> ImageFormat:
    """Classify an open binary file by its first four bytes.

    The read cursor is restored afterwards so the file can be decoded next.
    """
    position = file.tell()
    try:
        _ = file.seek(0)
        head = file.read(MAGIC_LENGTH)
    finally:
        _ = file.seek(position)
    return sniff_bytes(head)


def sniff_path(path: str | Path) -> ImageFormat:
    with open(path, "rb") as f:
        return sniff_format(f)
