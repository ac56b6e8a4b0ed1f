"""來源資料夾掃描。"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from ..utils import path_utils
from ..utils.logger import get_logger


class FileScanner:
    def __init__(self, logger=None) -> None:
        self.logger = logger or get_logger(self.__class__.__name__)

    def scan_directory(
        self,
        root: Path,
        exclude: Iterable[Path] = (),
        exclude_files: Iterable[Path] = (),
    ) -> list[Path]:
        """遞迴列出 root 下所有一般檔案，依路徑排序。

        exclude 中的資料夾整個略過，exclude_files 中的檔案（keepfile、設定檔、日誌、報告）不列出。
        """
        results: list[Path] = []
        excluded = [path.resolve() for path in exclude]
        excluded_files = [path.resolve() for path in exclude_files]

        def on_error(exc: OSError) -> None:
            self.logger.warning(f"無法讀取資料夾: {exc.filename} ({exc.strerror})")

        for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
            current_dir = Path(dirpath)

            filtered_dirs: list[str] = []
            for name in dirnames:
                candidate = current_dir / name
                if path_utils.is_excluded(candidate, excluded):
                    self.logger.debug(f"SKIPPED_DIR: {candidate}")
                    continue
                filtered_dirs.append(name)
            dirnames[:] = filtered_dirs

            for name in filenames:
                file_path = current_dir / name
                if not file_path.is_file():
                    continue
                if path_utils.is_excluded(file_path, excluded_files):
                    self.logger.debug(f"SKIPPED_FILE: {file_path}")
                    continue
                results.append(file_path)

        results.sort()
        self.logger.debug(f"掃描完成，共 {len(results)} 個檔案")
        return results
