"""Run configuration built once from the command line."""

import os
from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .batch import DEFAULT_MAX_WORKERS
from .common.errors import UsageError
from .plugins.image_resize.schema import ImageResizeParams
from .utils.size_spec import SizeSpec, parse_size_spec

DIRECTORY_SEPARATORS = tuple({"/", os.sep})


class ResizeConfig(BaseModel):
    """Immutable configuration for one irt run.

    An input ending with a path separator selects batch mode.
    """

    input_path: str = ""
    width: SizeSpec | None = None
    height: SizeSpec | None = None
    length: SizeSpec | None = None
    output_path: str | None = None
    jobs: int = Field(default=DEFAULT_MAX_WORKERS, ge=1)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @field_validator("width", "height", "length", mode="before")
    @classmethod
    def parse_spec(cls, v: str | SizeSpec | None) -> SizeSpec | None:
        if isinstance(v, str):
            return parse_size_spec(v) if v else None
        return v

    @field_validator("output_path", mode="before")
    @classmethod
    def empty_output_is_unset(cls, v: str | None) -> str | None:
        return v or None

    @model_validator(mode="after")
    def validate_mode(self) -> Self:
        if not self.input_path:
            raise UsageError("Please input filename or directory!")

        if self.is_batch:
            if self.length is None:
                raise UsageError("Please input length")
        elif (self.width is None) == (self.height is None):
            raise UsageError("Please input width or height")

        return self

    @property
    def is_batch(self) -> bool:
        return self.input_path.endswith(DIRECTORY_SEPARATORS)

    def single_file_params(self) -> ImageResizeParams:
        return ImageResizeParams(
            input_path=self.input_path,
            output_path=self.output_path,
            width=self.width,
            height=self.height,
        )
