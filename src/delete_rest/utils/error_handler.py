"""錯誤收集與報告工具。"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..models.error_record import ProcessError


@dataclass
class ErrorHandler:
    """集中管理不會中止整體執行的錯誤：檔案操作失敗與被略過的設定檔。"""

    errors: List[ProcessError] = field(default_factory=list)

    def add(self, error: ProcessError) -> None:
        self.errors.append(error)

    def add_warning(self, code: str, message: str, file_path: str | None = None) -> None:
        self.add(ProcessError(code=code, message=message, file_path=file_path))

    def has_errors(self) -> bool:
        return bool(self.errors)

    def summary(self) -> str:
        if not self.errors:
            return "No errors"
        lines = [f"{len(self.errors)} errors occurred"]
        lines.extend(f"  {error}" for error in self.errors)
        return "\n".join(lines)
