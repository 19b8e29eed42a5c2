"""Pure image resize computation logic (single image)."""

from PIL import Image

from ....utils.profiling import timed

# Rounding bias applied when deriving the unspecified axis.
_ROUNDING_BIAS = 0.7


def derive_length(other: int, target: int, axis: int) -> int:
    """Scale ``other`` by ``target / axis``, never returning less than 1."""
    return max(1, int(_ROUNDING_BIAS + other * target / axis))


@timed
def resize_image(
    img: Image.Image,
    width: int,
    height: int,
    resample: Image.Resampling = Image.Resampling.NEAREST,
) -> Image.Image:
    """
    Resize a decoded image.

    A target of 0 on one axis is derived from the other axis and the
    original aspect ratio. Both axes 0 returns an unscaled copy.

    Args:
        img: Decoded source image
        width: Target width in pixels, or 0
        height: Target height in pixels, or 0
        resample: Pillow resampling filter

    Returns:
        A new resized image; ``img`` is left untouched
    """
    original_width, original_height = img.size

    if width == 0 and height == 0:
        return img.copy()

    if width == 0:
        width = derive_length(original_width, height, original_height)
    elif height == 0:
        height = derive_length(original_height, width, original_width)

    return img.resize((width, height), resample)
