"""Pydantic schemas for task parameters, task records and batch summaries."""

from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

# ─────────────────────────────────────────────────────────────
# Base task params / output
# ─────────────────────────────────────────────────────────────


class BaseJobParams(BaseModel):
    """Base parameters for all compute tasks."""

    input_path: str = Field(description="path to the input file")
    output_path: str | None = Field(default=None, description="path to the output file")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class TaskOutput(BaseModel):
    pass


# ─────────────────────────────────────────────────────────────
# Task execution record
# ─────────────────────────────────────────────────────────────

TaskStatus = Literal["completed", "error"]


class TaskRecord(BaseModel):
    """Outcome of one ComputeModule.execute() call."""

    input_path: str
    status: TaskStatus
    output: dict[str, object] | None = None
    error_message: str | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    @property
    def ok(self) -> bool:
        return self.status == "completed"


# ─────────────────────────────────────────────────────────────
# Batch summary
# ─────────────────────────────────────────────────────────────


class BatchSummary(BaseModel):
    """Every record produced by one directory run, in listing order."""

    output_dir: str
    records: list[TaskRecord] = Field(default_factory=list)

    @computed_field
    @property
    def succeeded(self) -> int:
        return sum(1 for record in self.records if record.ok)

    @computed_field
    @property
    def failed(self) -> int:
        return sum(1 for record in self.records if not record.ok)

    @property
    def failures(self) -> list[TaskRecord]:
        return [record for record in self.records if not record.ok]
