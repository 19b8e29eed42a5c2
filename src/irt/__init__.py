"""irt - resize an image file or a directory of images."""

from .batch import BatchResizer
from .common.compute_module import ComputeModule
from .common.errors import (
    ImageDecodeError,
    IrtError,
    SizeSpecError,
    UnsupportedFormatError,
    UsageError,
)
from .common.schemas import BaseJobParams, BatchSummary, TaskOutput, TaskRecord
from .config import ResizeConfig
from .plugins.image_resize import ImageResizeOutput, ImageResizeParams, ImageResizeTask
from .utils.image_formats import ImageFormat, sniff_format
from .utils.size_spec import SizeSpec, parse_size_spec, resolve_size

__version__ = "0.1.0"

__all__ = [
    "BaseJobParams",
    "BatchResizer",
    "BatchSummary",
    "ComputeModule",
    "ImageDecodeError",
    "ImageFormat",
    "ImageResizeOutput",
    "ImageResizeParams",
    "ImageResizeTask",
    "IrtError",
    "ResizeConfig",
    "SizeSpec",
    "SizeSpecError",
    "TaskOutput",
    "TaskRecord",
    "UnsupportedFormatError",
    "UsageError",
    "__version__",
    "parse_size_spec",
    "resolve_size",
    "sniff_format",
]
