"""Image resize task implementation."""

import asyncio
from pathlib import Path
from typing import Callable

from loguru import logger
from typing_extensions import override

from ...common.compute_module import ComputeModule
from ...utils.image_formats import ImageFormat, sniff_format
from .algo.codec import decode_image, encode_image
from .algo.image_resize import resize_image
from .schema import ImageResizeOutput, ImageResizeParams


def compute_target_size(
    params: ImageResizeParams, original_width: int, original_height: int
) -> tuple[int, int]:
    """Return the (width, height) to request; 0 means derive proportionally.

    Raises:
        ValueError: If the size spec the mode needs is missing
    """
    if params.batch:
        if params.length is None:
            raise ValueError("batch mode requires a length")
        if original_width < original_height:
            return 0, params.length.resolve(original_height)
        return params.length.resolve(original_width), 0

    if params.width is not None:
        return params.width.resolve(original_width), 0

    if params.height is None:
        raise ValueError("exactly one of width or height is required")
    return 0, params.height.resolve(original_height)


def resolve_output_path(params: ImageResizeParams, image_format: ImageFormat) -> Path:
    input_path = Path(params.input_path)
    if params.batch:
        if params.output_dir is None:
            raise ValueError("batch mode requires an output directory")
        return Path(params.output_dir) / input_path.name

    if params.output_path:
        return Path(params.output_path)

    return Path.cwd() / f"resized.{image_format.extension}"


class ImageResizeTask(ComputeModule[ImageResizeParams, ImageResizeOutput]):
    """Compute module for resizing one image file."""

    @property
    @override
    def task_type(self) -> str:
        return "image_resize"

    @override
    async def run(
        self,
        params: ImageResizeParams,
        progress_callback: Callable[[int], None] | None = None,
    ) -> ImageResizeOutput:
        output = await asyncio.to_thread(self.resize_file, params)

        if progress_callback:
            progress_callback(100)

        return output

    def resize_file(self, params: ImageResizeParams) -> ImageResizeOutput:
        """Sniff, decode, resize, encode and write one file (blocking)."""
        input_path = Path(params.input_path)

        with input_path.open("rb") as f:
            image_format = sniff_format(f)
            img = decode_image(f, image_format, name=str(input_path))

        with img:
            original_width, original_height = img.size
            target_width, target_height = compute_target_size(
                params, original_width, original_height
            )
            resized = resize_image(img, target_width, target_height)

        output_path = resolve_output_path(params, image_format)
        _ = encode_image(resized, output_path, image_format)

        logger.info(f"input file: {input_path}, width:{original_width}, height:{original_height}")
        logger.info(f"output file: {output_path}, width:{target_width}, height:{target_height}")

        return ImageResizeOutput(
            input_path=str(input_path),
            output_path=str(output_path),
            format=image_format.value,
            original_width=original_width,
            original_height=original_height,
            target_width=target_width,
            target_height=target_height,
        )
