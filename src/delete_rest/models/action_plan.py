"""本次執行唯一的檔案操作。"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class Operation(str, Enum):
    COPY = "COPY"
    MOVE = "MOVE"
    DELETE = "DELETE"

    @property
    def verb(self) -> str:
        return self.value.lower()

    @property
    def past_tense(self) -> str:
        return {"COPY": "copied", "MOVE": "moved", "DELETE": "deleted"}[self.value]


@dataclass(frozen=True)
class ActionPlan:
    operation: Operation
    destination: Optional[Path] = None
    is_default: bool = False

    def __post_init__(self) -> None:
        if self.operation is Operation.DELETE:
            if self.destination is not None:
                raise ValueError("DELETE does not take a destination")
        elif self.destination is None:
            raise ValueError(f"{self.operation.value} requires a destination")
