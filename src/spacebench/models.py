# src/spacebench/models.py
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

@dataclass(frozen=True)
class CountResult:
    """Outcome of counting one file: either a count or a failure treated as zero."""
    path: Path
    count: int = 0
    lines: int = 0
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def contribution(self) -> int:
        return 0 if self.failed else self.count

    @classmethod
    def failure(cls, path: Path, exc: Exception) -> "CountResult":
        return cls(path=path, count=0, error=f"{type(exc).__name__}: {exc}")

@dataclass(frozen=True)
class AggregateResult:
    """Immutable (total, elapsed) pair produced by one strategy run."""
    total: int
    elapsed_ms: float
    files: int = 0
    units: int = 0

    def average_ms_per_file(self) -> float:
        return self.elapsed_ms / self.files if self.files else 0.0

@dataclass(frozen=True)
class Comparison:
    per_file: AggregateResult
    per_line: AggregateResult
    space_difference: int
    relative_difference_pct: float
    faster: Optional[str]
    time_saved_ms: float
    speedup: Optional[float]
