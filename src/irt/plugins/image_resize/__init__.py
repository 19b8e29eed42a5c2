"""Image resize plugin."""

from .schema import ImageResizeOutput, ImageResizeParams
from .task import ImageResizeTask, compute_target_size

__all__ = ["ImageResizeTask", "ImageResizeParams", "ImageResizeOutput", "compute_target_size"]
