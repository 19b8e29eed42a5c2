"""Unit tests for the resize capability and the image codecs."""

from pathlib import Path

import pytest
from PIL import Image

from irt.common.errors import ImageDecodeError, UnsupportedFormatError
from irt.plugins.image_resize.algo.codec import decode_image, encode_image
from irt.plugins.image_resize.algo.image_resize import derive_length, resize_image
from irt.utils.image_formats import ImageFormat

# ============================================================================
# ALGORITHM TESTS - resize_image
# ============================================================================


def test_resize_width_only_derives_height():
    """Test a 0 height is derived from the aspect ratio."""
    img = Image.new("RGB", (200, 100))
    resized = resize_image(img, 100, 0)
    assert resized.size == (100, 50)


def test_resize_height_only_derives_width():
    """Test a 0 width is derived from the aspect ratio."""
    img = Image.new("RGB", (100, 400))
    resized = resize_image(img, 0, 200)
    assert resized.size == (50, 200)


def test_resize_both_dimensions():
    """Test explicit width and height are used as-is."""
    img = Image.new("RGB", (200, 100))
    assert resize_image(img, 30, 70).size == (30, 70)


def test_resize_both_zero_returns_copy():
    """Test (0, 0) returns an unscaled copy, not the same object."""
    img = Image.new("RGB", (64, 48))
    resized = resize_image(img, 0, 0)
    assert resized.size == (64, 48)
    assert resized is not img


def test_resize_upscale():
    """Test targets above the original size scale up."""
    img = Image.new("RGB", (10, 20))
    assert resize_image(img, 0, 40).size == (20, 40)


def test_resize_uses_nearest_neighbor_by_default():
    """Test nearest-neighbor keeps the original palette of colors."""
    img = Image.new("RGB", (4, 4), color=(255, 0, 0))
    img.paste((0, 0, 255), (0, 0, 2, 4))
    resized = resize_image(img, 8, 0)
    colors = {color for _, color in resized.getcolors()}
    assert colors == {(255, 0, 0), (0, 0, 255)}


def test_resize_leaves_source_untouched():
    """Test the source image keeps its size."""
    img = Image.new("L", (80, 40))
    _ = resize_image(img, 40, 0)
    assert img.size == (80, 40)


def test_derive_length_rounding_bias():
    """Test the 0.7 rounding bias when deriving the other axis."""
    # 100 * 33 / 100 = 33.0 -> 33
    assert derive_length(100, 33, 100) == 33
    # 3 * 1 / 10 = 0.3 -> int(1.0) = 1
    assert derive_length(3, 1, 10) == 1
    # 10 * 1 / 4 = 2.5 -> int(3.2) = 3
    assert derive_length(10, 1, 4) == 3


def test_derive_length_never_zero():
    """Test a degenerate derivation is clamped to 1 pixel."""
    assert derive_length(1, 1, 1000) == 1


# ============================================================================
# CODEC TESTS
# ============================================================================


@pytest.mark.parametrize(
    ("fixture_name", "image_format"),
    [
        ("sample_png", ImageFormat.PNG),
        ("sample_jpeg", ImageFormat.JPEG),
        ("sample_gif", ImageFormat.GIF),
    ],
)
def test_decode_supported_formats(
    fixture_name: str, image_format: ImageFormat, request: pytest.FixtureRequest
):
    """Test PNG, JPEG and GIF decode with their own codec."""
    path: Path = request.getfixturevalue(fixture_name)
    with path.open("rb") as f:
        img = decode_image(f, image_format, name=str(path))
    assert img.format == image_format.pil_format
    assert img.size[0] > 0 and img.size[1] > 0


def test_decode_bmp_is_unsupported(sample_bmp: Path):
    """Test BMP is rejected explicitly instead of yielding a placeholder image."""
    with sample_bmp.open("rb") as f:
        with pytest.raises(UnsupportedFormatError, match="unsupported image format 'bmp'"):
            _ = decode_image(f, ImageFormat.BMP, name=str(sample_bmp))


def test_decode_unknown_is_unsupported(tmp_path: Path):
    """Test unknown magic bytes are rejected."""
    junk = tmp_path / "junk.bin"
    _ = junk.write_bytes(b"not an image at all")
    with junk.open("rb") as f:
        with pytest.raises(UnsupportedFormatError):
            _ = decode_image(f, ImageFormat.UNKNOWN, name=str(junk))


def test_decode_truncated_png(tmp_path: Path):
    """Test a file with a PNG signature but no image data raises ImageDecodeError."""
    broken = tmp_path / "broken.png"
    _ = broken.write_bytes(b"\x89PNG\r\n\x1a\n" + b"\x00" * 16)
    with broken.open("rb") as f:
        with pytest.raises(ImageDecodeError, match="cannot decode png image"):
            _ = decode_image(f, ImageFormat.PNG, name=str(broken))


def test_decode_rewinds_before_reading(sample_png: Path):
    """Test decoding works after the cursor has been moved."""
    with sample_png.open("rb") as f:
        _ = f.read(4)
        img = decode_image(f, ImageFormat.PNG)
    assert img.size == (200, 100)


@pytest.mark.parametrize("image_format", [ImageFormat.PNG, ImageFormat.JPEG, ImageFormat.GIF])
def test_encode_matches_format(tmp_path: Path, image_format: ImageFormat):
    """Test encoding writes the requested format."""
    output_path = tmp_path / f"out.{image_format.extension}"
    result = encode_image(Image.new("RGB", (20, 10)), output_path, image_format)

    assert result == str(output_path)
    with Image.open(output_path) as img:
        assert img.format == image_format.pil_format
        assert img.size == (20, 10)


def test_encode_bmp_is_unsupported(tmp_path: Path):
    """Test there is no BMP encoder path."""
    with pytest.raises(UnsupportedFormatError):
        _ = encode_image(Image.new("RGB", (2, 2)), tmp_path / "x.bmp", ImageFormat.BMP)


def test_encode_missing_directory(tmp_path: Path):
    """Test writing into a missing directory raises OSError."""
    with pytest.raises(OSError):
        _ = encode_image(Image.new("RGB", (2, 2)), tmp_path / "missing" / "x.png", ImageFormat.PNG)


def test_decode_over_pixel_limit(sample_png: Path, monkeypatch: pytest.MonkeyPatch):
    """Test Pillow's decompression bomb error surfaces as ImageDecodeError."""
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
    with sample_png.open("rb") as f:
        with pytest.raises(ImageDecodeError, match="cannot decode png image"):
            _ = decode_image(f, ImageFormat.PNG, name=str(sample_png))
