# src/spacebench/core/report.py
from spacebench.config import STRATEGY_PER_FILE, STRATEGY_PER_LINE
from spacebench.models import AggregateResult, Comparison

def compare(per_file: AggregateResult, per_line: AggregateResult) -> Comparison:
    """Compares the two strategy runs. A non-zero space difference means one of them miscounted."""
    t1, t2 = per_file.elapsed_ms, per_line.elapsed_ms
    slowest = max(t1, t2)
    relative = abs(t1 - t2) / slowest * 100 if slowest > 0 else 0.0

    if t1 < t2:
        faster, saved = STRATEGY_PER_FILE, t2 - t1
        speedup = t2 / t1 if t1 > 0 else None
    elif t2 < t1:
        faster, saved = STRATEGY_PER_LINE, t1 - t2
        speedup = t1 / t2 if t2 > 0 else None
    else:
        faster, saved, speedup = None, 0.0, None

    return Comparison(
        per_file=per_file,
        per_line=per_line,
        space_difference=abs(per_file.total - per_line.total),
        relative_difference_pct=relative,
        faster=faster,
        time_saved_ms=saved,
        speedup=speedup,
    )
