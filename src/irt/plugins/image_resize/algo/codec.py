"""Decode and encode images with the codec matching their sniffed format."""

from pathlib import Path
from typing import BinaryIO

from PIL import Image, UnidentifiedImageError

from ....common.errors import ImageDecodeError, UnsupportedFormatError
from ....utils.image_formats import ImageFormat


def decode_image(file: BinaryIO, image_format: ImageFormat, name: str = "<stream>") -> Image.Image:
    """
    Decode ``file`` with the codec for ``image_format``.

    Only the codec for the sniffed format is tried. GIF decodes its first
    frame. Pixel data is loaded eagerly so the file may be closed afterwards.

    Raises:
        UnsupportedFormatError: If the format is BMP or unknown
        ImageDecodeError: If the codec rejects the data or the image exceeds
            Pillow's decompression bomb limit
    """
    pil_format = image_format.pil_format
    if not image_format.is_decodable or pil_format is None:
        raise UnsupportedFormatError(name, image_format.value)

    _ = file.seek(0)
    try:
        img = Image.open(file, formats=[pil_format])
        img.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError) as exc:
        raise ImageDecodeError(name, image_format.value, str(exc)) from exc

    return img


def encode_image(img: Image.Image, output_path: str | Path, image_format: ImageFormat) -> str:
    """
    Encode ``img`` as ``image_format`` with default options and write it.

    Raises:
        UnsupportedFormatError: If the format has no encoder here
        OSError: If the output file cannot be created or written
    """
    pil_format = image_format.pil_format
    if not image_format.is_decodable or pil_format is None:
        raise UnsupportedFormatError(str(output_path), image_format.value)

    output_path = Path(output_path)
    img.save(output_path, format=pil_format)
    return str(output_path)
