"""Image resize and codec algorithms."""

from .codec import decode_image, encode_image
from .image_resize import derive_length, resize_image

__all__ = ["decode_image", "encode_image", "derive_length", "resize_image"]
