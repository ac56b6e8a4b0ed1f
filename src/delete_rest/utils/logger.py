"""日誌工具。"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .errors import OutputFileError

ROOT_LOGGER_NAME = "delete_rest"
_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def get_logger(name: str, log_file: Optional[Path] = None) -> logging.Logger:
    """回傳 delete_rest 之下的 logger，handler 只掛在根 logger 上。"""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        root.setLevel(logging.INFO)

        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(logging.DEBUG)
        stream_handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(stream_handler)

    if log_file is not None and not any(
        isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == log_file.resolve()
        for handler in root.handlers
    ):
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as exc:
            raise OutputFileError(f"Cannot open log file: {exc}") from exc
        file_handler.setLevel(logging.WARNING)
        file_handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(file_handler)

    if name == ROOT_LOGGER_NAME:
        return root
    return root.getChild(name)


def set_verbosity(verbose: bool) -> None:
    get_logger(ROOT_LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.INFO)
