"""Batch runtime - resizes every file in a directory with a bounded worker pool."""

import asyncio
import os
from pathlib import Path
from typing import Callable

from loguru import logger

from .common.schemas import BatchSummary, TaskRecord
from .plugins.image_resize.schema import ImageResizeParams
from .plugins.image_resize.task import ImageResizeTask
from .utils.size_spec import SizeSpec

OUTPUT_DIR_NAME = "resized"
DEFAULT_MAX_WORKERS = os.cpu_count() or 4


def output_dir_for(input_dir: str | Path) -> Path:
    """Return ``<input_dir>/resized``."""
    return Path(input_dir) / OUTPUT_DIR_NAME


class BatchResizer:
    """Resize every non-directory entry of a directory.

    Responsibilities:
    - Creates ``<input_dir>resized/`` once, before any job starts
    - Queues one job per regular entry (subdirectories are ignored)
    - Drains the queue with ``max_workers`` workers
    - Collects one TaskRecord per job; a failed job never stops its siblings

    Example:
        resizer = BatchResizer(max_workers=4)
        summary = asyncio.run(resizer.run("photos/", "1024px"))
        print(summary.succeeded, summary.failed)
    """

    def __init__(
        self,
        task: ImageResizeTask | None = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ):
        """Initialize the batch runtime.

        Args:
            task: Resize task to run per file. Defaults to a new ImageResizeTask.
            max_workers: Number of files processed at the same time.
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")

        self.task: ImageResizeTask = task if task is not None else ImageResizeTask()
        self.max_workers: int = max_workers

    def prepare_output_dir(self, input_dir: str | Path) -> Path:
        """Create the output directory if it does not exist.

        Raises:
            OSError: If the directory cannot be created (e.g. a file has its name)
        """
        output_dir = output_dir_for(input_dir)
        existed = output_dir.is_dir()
        # exist_ok still raises FileExistsError when a non-directory holds the name
        output_dir.mkdir(exist_ok=True)
        if not existed:
            logger.info(f"Created output directory: {output_dir}")
        return output_dir

    def list_inputs(self, input_dir: str | Path) -> list[Path]:
        """Return the direct non-directory entries of ``input_dir``, sorted by name.

        Raises:
            OSError: If the directory cannot be listed
        """
        return sorted(entry for entry in Path(input_dir).iterdir() if not entry.is_dir())

    async def run(
        self,
        input_dir: str | Path,
        length: str | SizeSpec,
        progress_callback: Callable[[int], None] | None = None,
    ) -> BatchSummary:
        """Resize every file in ``input_dir`` so its longer axis matches ``length``.

        Args:
            input_dir: Directory whose direct entries are resized
            length: Long-edge size spec, e.g. ``"800px"`` or ``"50%"``
            progress_callback: Called with the completed percentage after each file

        Returns:
            BatchSummary with one record per file, in listing order

        Raises:
            OSError: If the output directory cannot be created or the input listed
        """
        output_dir = self.prepare_output_dir(input_dir)
        files = self.list_inputs(input_dir)

        queue: asyncio.Queue[tuple[int, ImageResizeParams]] = asyncio.Queue()
        for index, path in enumerate(files):
            queue.put_nowait(
                (
                    index,
                    ImageResizeParams(
                        input_path=str(path),
                        batch=True,
                        output_dir=str(output_dir),
                        length=length,
                    ),
                )
            )

        records: dict[int, TaskRecord] = {}
        total_files = len(files)

        async def worker() -> None:
            while True:
                try:
                    index, params = queue.get_nowait()
                except asyncio.QueueEmpty:
                    return

                records[index] = await self.task.execute(params)

                if progress_callback:
                    progress_callback(int(len(records) / total_files * 100))

        worker_count = min(self.max_workers, total_files)
        logger.info(f"Resizing {total_files} file(s) from {input_dir} with {worker_count} worker(s)")
        _ = await asyncio.gather(*(worker() for _ in range(worker_count)))

        summary = BatchSummary(
            output_dir=str(output_dir),
            records=[records[index] for index in range(total_files)],
        )
        logger.info(
            f"Batch finished: {summary.succeeded} resized, {summary.failed} failed -> {output_dir}"
        )
        return summary
