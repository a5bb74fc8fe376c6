# src/spacebench/core/counter.py
from concurrent.futures import Executor
from pathlib import Path
from typing import List

from spacebench.config import SPACE
from spacebench.models import CountResult

def count_spaces(text: str) -> int:
    """Counts U+0020 only; tabs, newlines and other whitespace are ignored."""
    count = 0
    for ch in text:
        if ch == SPACE:
            count += 1
    return count

def read_lines(path: Path) -> List[str]:
    # Universal newlines: \n, \r\n and \r all end a line, nothing else does
    lines = path.read_text(encoding="utf-8").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines

def count_file(path: Path) -> CountResult:
    """Counts the spaces in a whole file. Unreadable files contribute zero."""
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return CountResult.failure(path, e)
    return CountResult(path=path, count=count_spaces(content))

def count_file_by_lines(path: Path, line_pool: Executor) -> CountResult:
    """
    Counts the spaces in a file with one task per line on `line_pool`.
    Per-line results are collected after the join and summed in order.
    """
    try:
        lines = read_lines(path)
    except (OSError, UnicodeDecodeError) as e:
        return CountResult.failure(path, e)

    futures = [line_pool.submit(count_spaces, line) for line in lines]
    results = [f.result() for f in futures]

    file_spaces = 0
    for count in results:
        file_spaces += count
    return CountResult(path=path, count=file_spaces, lines=len(lines))
