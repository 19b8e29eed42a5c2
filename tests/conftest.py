"""Test configuration and fixtures for irt.

This module provides:
- Image factories writing real PNG/JPEG/GIF/BMP files with Pillow
- Directory fixtures for batch runs
- A loguru capture fixture
"""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from loguru import logger
from PIL import Image, ImageDraw

ImageFactory = Callable[..., Path]

PIL_FORMATS = {
    "png": "PNG",
    "jpg": "JPEG",
    "gif": "GIF",
    "bmp": "BMP",
}


# ============================================================================
# Image Factories
# ============================================================================


def write_image(path: Path, size: tuple[int, int], fmt: str) -> Path:
    """Write a synthetic image with a simple pattern so codecs have real data."""
    img = Image.new("RGB", size, color=(73, 109, 137))
    draw = ImageDraw.Draw(img)
    width, height = size
    draw.line([(0, 0), (width - 1, height - 1)], fill=(255, 255, 255), width=1)
    draw.rectangle([width // 4, height // 4, width // 2, height // 2], fill=(200, 100, 100))
    img.save(path, PIL_FORMATS[fmt])
    return path


@pytest.fixture
def make_image(tmp_path: Path) -> ImageFactory:
    """Factory: make_image("name.png", (w, h), fmt="png", directory=None) -> Path."""

    def _make(
        name: str,
        size: tuple[int, int] = (200, 100),
        fmt: str = "png",
        directory: Path | None = None,
    ) -> Path:
        target_dir = directory if directory is not None else tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        return write_image(target_dir / name, size, fmt)

    return _make


@pytest.fixture
def sample_png(make_image: ImageFactory) -> Path:
    return make_image("sample.png", (200, 100), "png")


@pytest.fixture
def sample_jpeg(make_image: ImageFactory) -> Path:
    return make_image("sample.jpg", (300, 150), "jpg")


@pytest.fixture
def sample_gif(make_image: ImageFactory) -> Path:
    return make_image("sample.gif", (100, 400), "gif")


@pytest.fixture
def sample_bmp(make_image: ImageFactory) -> Path:
    return make_image("sample.bmp", (64, 32), "bmp")


@pytest.fixture
def image_dir(tmp_path: Path, make_image: ImageFactory) -> Path:
    """Directory with 5 images of mixed formats/orientations and one subdirectory."""
    directory = tmp_path / "photos"
    make_image("a.png", (300, 150), "png", directory)
    make_image("b.jpg", (100, 400), "jpg", directory)
    make_image("c.gif", (120, 120), "gif", directory)
    make_image("d.png", (50, 200), "png", directory)
    make_image("e.jpg", (640, 480), "jpg", directory)
    (directory / "nested").mkdir()
    make_image("ignored.png", (10, 10), "png", directory / "nested")
    return directory


# ============================================================================
# Logging
# ============================================================================


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(str(message).rstrip("\n")),
        format="{level} {message}",
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)
