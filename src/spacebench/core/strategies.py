# src/spacebench/core/strategies.py
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Union

from spacebench.core.counter import count_file, count_file_by_lines
from spacebench.core.lister import list_files
from spacebench.models import AggregateResult, CountResult

class Stopwatch:
    """High-resolution wall-clock timer, usable as a context manager."""

    def __init__(self):
        self._start: Optional[float] = None
        self._stop: Optional[float] = None

    def __enter__(self) -> "Stopwatch":
        self._start = time.perf_counter()
        self._stop = None
        return self

    def __exit__(self, exc_type, exc, tb):
        self._stop = time.perf_counter()

    @property
    def elapsed_ms(self) -> float:
        if self._start is None:
            return 0.0
        end = self._stop if self._stop is not None else time.perf_counter()
        return (end - self._start) * 1000.0

class _Accumulator:
    """Lock-guarded running total shared by concurrent file tasks."""

    def __init__(self):
        self._lock = threading.Lock()
        self.total = 0
        self.lines = 0

    def add(self, result: CountResult) -> None:
        with self._lock:
            self.total += result.contribution
            self.lines += result.lines

def count_per_file(
    folder: Union[str, Path],
    max_workers: Optional[int] = None,
    exclude: Optional[List[str]] = None,
) -> AggregateResult:
    """
    Strategy 1: one task per file.
    Results are collected after the join and summed sequentially.
    """
    files = list_files(folder, exclude)
    if not files:
        return AggregateResult(total=0, elapsed_ms=0.0)

    with Stopwatch() as watch:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            futures = [pool.submit(count_file, path) for path in files]
            results = [f.result() for f in futures]

        total_spaces = 0
        for result in results:
            total_spaces += result.contribution

    return AggregateResult(
        total=total_spaces,
        elapsed_ms=watch.elapsed_ms,
        files=len(files),
        units=len(files),
    )

def count_per_line(
    folder: Union[str, Path],
    max_workers: Optional[int] = None,
    exclude: Optional[List[str]] = None,
) -> AggregateResult:
    """
    Strategy 2: one task per file, each fanning out one task per line.
    File tasks and line tasks run on separate pools so a file task waiting
    on its lines never holds a worker its lines need.
    """
    files = list_files(folder, exclude)
    if not files:
        return AggregateResult(total=0, elapsed_ms=0.0)

    accumulator = _Accumulator()

    def _file_task(path: Path) -> None:
        accumulator.add(count_file_by_lines(path, line_pool))

    with Stopwatch() as watch:
        with ThreadPoolExecutor(max_workers=max_workers) as line_pool, \
                ThreadPoolExecutor(max_workers=max_workers) as file_pool:
            futures = [file_pool.submit(_file_task, path) for path in files]
            for f in futures:
                f.result()

    return AggregateResult(
        total=accumulator.total,
        elapsed_ms=watch.elapsed_ms,
        files=len(files),
        units=accumulator.lines,
    )
