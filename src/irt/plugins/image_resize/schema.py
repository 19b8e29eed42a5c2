"""Image resize parameters schema."""

from typing import Self

from pydantic import Field, field_validator, model_validator

from ...common.schemas import BaseJobParams, TaskOutput
from ...utils.size_spec import SizeSpec, parse_size_spec


class ImageResizeParams(BaseJobParams):
    """Parameters for resizing one image file.

    Attributes:
        input_path: Path of the image to resize
        output_path: Explicit output file (single-file mode only). When unset,
            ``<cwd>/resized.<ext>`` is used
        batch: Batch mode; ``length`` governs the longer original axis
        output_dir: Directory receiving ``<basename(input)>`` in batch mode
        width: Width spec (single-file mode)
        height: Height spec (single-file mode)
        length: Long-edge spec (batch mode)
    """

    batch: bool = False
    output_dir: str | None = None
    width: SizeSpec | None = None
    height: SizeSpec | None = None
    length: SizeSpec | None = None

    @field_validator("width", "height", "length", mode="before")
    @classmethod
    def parse_spec(cls, v: str | SizeSpec | None) -> SizeSpec | None:
        if isinstance(v, str):
            return parse_size_spec(v) if v else None
        return v

    @model_validator(mode="after")
    def validate_mode(self) -> Self:
        if self.batch:
            if self.length is None:
                raise ValueError("batch mode requires a length")
            if self.output_dir is None:
                raise ValueError("batch mode requires an output directory")
        elif (self.width is None) == (self.height is None):
            raise ValueError("exactly one of width or height is required")
        return self


class ImageResizeOutput(TaskOutput):
    input_path: str
    output_path: str
    format: str
    original_width: int = Field(ge=0)
    original_height: int = Field(ge=0)
    target_width: int = Field(ge=0)
    target_height: int = Field(ge=0)
