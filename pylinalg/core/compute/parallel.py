"""
Structured parallel-for over the cells of a 2-D grid.

Each cell is an independent unit of work. Work runs on a bounded thread
pool and the call returns only once every cell has finished: a full
barrier, with no cancellation or timeout. If any unit raises, the first
exception (in row-major order) is re-raised after the barrier.
"""

from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable


def parallel_cells(
    func: Callable[[int, int], None],
    rows: int,
    columns: int,
    max_workers: int | None = None,
) -> None:
    """
    Run func(row, column) once for every 1-based cell of a rows x columns grid.

    Args:
        func: Unit of work. Must only write state owned by its own cell.
        rows: Number of grid rows
        columns: Number of grid columns
        max_workers: Pool size; None uses the ThreadPoolExecutor default

    Raises:
        ValueError: If max_workers is given and is less than 1
        Exception: Whatever the first failing unit raised
    """
    if max_workers is not None and max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [
            pool.submit(func, r, c)
            for r in range(1, rows + 1)
            for c in range(1, columns + 1)
        ]
        wait(futures)

    for future in futures:
        future.result()
