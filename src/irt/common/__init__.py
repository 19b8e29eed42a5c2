"""Common module - errors, schemas, and base classes."""

from .compute_module import ComputeModule
from .schemas import BaseJobParams, BatchSummary, TaskOutput, TaskRecord

__all__ = [
    "BaseJobParams",
    "BatchSummary",
    "ComputeModule",
    "TaskOutput",
    "TaskRecord",
]
