"""致命錯誤類型。"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence


class DeleteRestError(Exception):
    """所有在開始處理檔案前即中止執行的錯誤。"""


class ConfigError(DeleteRestError):
    """設定檔無法讀取或內容不合法。"""

    def __init__(self, message: str, *, path: Optional[Path] = None, errors: Sequence[str] = ()) -> None:
        self.path = path
        self.errors = list(errors)
        details = "".join(f"\n  {item}" for item in self.errors)
        location = f" ({path})" if path is not None else ""
        super().__init__(f"{message}{location}{details}")


class KeepFileError(DeleteRestError):
    """keepfile 無法讀取，或有無法解析的行。"""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[Path] = None,
        bad_lines: Sequence[tuple[int, str]] = (),
    ) -> None:
        self.path = path
        self.bad_lines = list(bad_lines)
        location = f" \"{path}\"" if path is not None else ""
        details = "".join(f"\n  Line {number}: {content}" for number, content in self.bad_lines)
        super().__init__(f"{message}{location}{details}")


class PlanSetupError(DeleteRestError):
    """目的地資料夾不可用，尚未動到任何檔案。"""


class SourceDirectoryError(DeleteRestError):
    """來源資料夾不存在或不是資料夾。"""


class OutputFileError(DeleteRestError):
    """報告或日誌檔無法寫入。"""
