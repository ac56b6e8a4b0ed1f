"""單一檔案的分類結果。"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class Label(str, Enum):
    KEEP = "KEEP"
    ACT = "ACT"
    SKIP = "SKIP"


@dataclass(frozen=True)
class ClassificationResult:
    path: Path
    relative_path: Path
    identifier: Optional[str]
    label: Label
