"""路徑處理工具。"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional


def is_excluded(path: Path, excluded: Iterable[Path]) -> bool:
    resolved = path.resolve()
    return any(resolved == item for item in excluded)


def is_within(path: Path, root: Path) -> bool:
    try:
        path.resolve().relative_to(root.resolve())
    except ValueError:
        return False
    return True


def relative_to_root(path: Path, root: Path) -> Path:
    try:
        return path.relative_to(root)
    except ValueError:
        return Path(path.name)


def nearest_existing_ancestor(path: Path) -> Optional[Path]:
    current = path
    while not current.exists():
        if current.parent == current:
            return None
        current = current.parent
    return current


def is_writable_dir(path: Path) -> bool:
    return path.is_dir() and os.access(path, os.W_OK | os.X_OK)
