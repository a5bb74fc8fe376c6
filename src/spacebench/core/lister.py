# src/spacebench/core/lister.py
from pathlib import Path
from typing import List, Optional, Union

import pathspec

class DirectoryNotFoundError(FileNotFoundError):
    """Raised when the target folder is missing or is not a directory."""

    def __init__(self, folder: Path):
        super().__init__(f"Directory not found: {folder}")
        self.folder = folder

def build_exclude_spec(patterns: Optional[List[str]] = None) -> Optional[pathspec.PathSpec]:
    """Compiles gitwildmatch exclusion patterns; returns None when there is nothing to exclude."""
    cleaned = [p.strip() for p in (patterns or []) if p and p.strip()]
    if not cleaned:
        return None
    return pathspec.GitIgnoreSpec.from_lines(cleaned)

def ensure_directory(folder: Union[str, Path]) -> Path:
    path = Path(folder)
    if not path.is_dir():
        raise DirectoryNotFoundError(path)
    return path

def list_files(folder: Union[str, Path], exclude: Optional[List[str]] = None) -> List[Path]:
    """
    Returns the regular files directly inside `folder`, sorted by name.
    Sub-directories are not descended into.
    """
    root = ensure_directory(folder)
    spec = build_exclude_spec(exclude)

    files = []
    for entry in sorted(root.iterdir()):
        if not entry.is_file():
            continue
        if spec is not None and spec.match_file(entry.name):
            continue
        files.append(entry)
    return files
