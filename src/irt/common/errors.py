"""Error types raised by irt."""

from typing_extensions import override


class IrtError(Exception):
    """Base class for every error irt raises on purpose."""

    def __init__(self, message: str = "image resize failed"):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return self.message


class UsageError(IrtError):
    """Missing or conflicting command-line options."""


class SizeSpecError(IrtError, ValueError):
    """A size specification such as ``80%`` or ``200px`` could not be parsed."""

    def __init__(self, spec: str, reason: str = "expected <int>, <int>px or <int>%"):
        self.spec: str = spec
        super().__init__(f"invalid size '{spec}': {reason}")


class UnsupportedFormatError(IrtError):
    """The file's magic bytes name a format irt cannot decode."""

    def __init__(self, path: str, image_format: str):
        self.path: str = path
        self.image_format: str = image_format
        super().__init__(f"{path}: unsupported image format '{image_format}'")


class ImageDecodeError(IrtError):
    """The codec for the sniffed format rejected the file contents."""

    def __init__(self, path: str, image_format: str, reason: str):
        self.path: str = path
        self.image_format: str = image_format
        super().__init__(f"{path}: cannot decode {image_format} image: {reason}")
