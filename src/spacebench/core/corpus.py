# src/spacebench/core/corpus.py
import random
import shutil
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Union

from spacebench.config import MAX_LEADING_SPACES, MIN_LEADING_SPACES, SPACE

def build_line(index: int, leading: int) -> str:
    """`leading` spaces, the label 'Line {index} ', then half as many trailing spaces."""
    return SPACE * leading + f"Line {index} " + SPACE * (leading // 2)

def spaces_in_line(leading: int) -> int:
    # Two spaces come from the label itself
    return leading + 2 + leading // 2

def _write_file(path: Path, lines_per_file: int, rng: random.Random) -> int:
    expected = 0
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for j in range(lines_per_file):
            leading = rng.randrange(MIN_LEADING_SPACES, MAX_LEADING_SPACES)
            f.write(build_line(j, leading) + "\n")
            expected += spaces_in_line(leading)
    return expected

def create_test_files(
    folder: Union[str, Path],
    file_count: int,
    lines_per_file: int,
    seed: Optional[int] = None,
) -> int:
    """
    Creates `folder` and writes `file_count` files named test_{i}.txt concurrently.
    Returns the number of spaces written across all files.
    """
    root = Path(folder)
    root.mkdir(parents=True, exist_ok=True)

    # One generator per file; random.Random is not shared between threads
    rngs = [random.Random(None if seed is None else seed + i) for i in range(file_count)]

    with ThreadPoolExecutor() as pool:
        futures = [
            pool.submit(_write_file, root / f"test_{i}.txt", lines_per_file, rngs[i])
            for i in range(file_count)
        ]
        return sum(f.result() for f in futures)

def remove_test_files(folder: Union[str, Path]) -> bool:
    """Deletes the corpus folder. Failures are reported and otherwise ignored."""
    try:
        shutil.rmtree(folder)
        return True
    except OSError as e:
        print(f"  > [Warning] Could not remove '{folder}': {e}", file=sys.stderr)
        return False
