"""ComputeModule - Abstract base class for compute tasks."""

from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

from loguru import logger

from .schemas import BaseJobParams, TaskOutput, TaskRecord

P = TypeVar("P", bound=BaseJobParams)
Q = TypeVar("Q", bound=TaskOutput)


class ComputeModule(ABC, Generic[P, Q]):
    """
    Stateless, template-method based compute module.

    - run() does the work and raises on failure
    - execute() never raises; it turns the outcome into a TaskRecord
    """

    @property
    @abstractmethod
    def task_type(self) -> str: ...

    @abstractmethod
    async def run(
        self,
        params: P,
        progress_callback: Callable[[int], None] | None = None,
    ) -> Q:
        """Execute the task and return its output metadata."""
        ...

    async def execute(
        self,
        params: P,
        progress_callback: Callable[[int], None] | None = None,
    ) -> TaskRecord:
        try:
            output = await self.run(params, progress_callback)

            return TaskRecord(
                input_path=params.input_path,
                status="completed",
                output=output.model_dump(),
            )

        except FileNotFoundError as exc:
            logger.warning(f"{self.task_type}: input file not found: {exc}")
            return TaskRecord(
                input_path=params.input_path,
                status="error",
                error_message=str(exc),
            )

        except Exception as exc:
            logger.warning(f"{self.task_type}: skipping {params.input_path}: {exc}")
            return TaskRecord(
                input_path=params.input_path,
                status="error",
                error_message=str(exc),
            )
