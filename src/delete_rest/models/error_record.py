"""單一檔案層級的錯誤與警告記錄。"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class ProcessError:
    code: str
    message: str
    file_path: Optional[str] = None

    @classmethod
    def from_exception(cls, code: str, exc: BaseException, path: Optional[Path] = None) -> "ProcessError":
        return cls(
            code=code,
            message=str(exc) or exc.__class__.__name__,
            file_path=str(path) if path is not None else None,
        )

    def __str__(self) -> str:
        location = f"{self.file_path}: " if self.file_path else ""
        return f"[{self.code}] {location}{self.message}"
